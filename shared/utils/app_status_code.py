class AppStatusCode:
    # success
    DATA_RETRIEVED_SUCCESSFULLY = "100"
    CREATED_SUCCESSFULLY = "101"
    UPDATED_SUCCESSFULLY = "102"
    DELETED_SUCCESSFULLY = "103"

    # failures
    OPERATION_FAILED = "200"
    INVALID_INPUT = "201"
    REQUIRED_VALIDATION_ERROR = "202"
    RECORD_NOT_FOUND = "203"
    REFERENCED_RECORD_NOT_FOUND = "204"
