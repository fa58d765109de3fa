"""OpenAPI `responses` entries shared by the CRUD routers."""

from stock_manager.schemas.inventory import ErrorResponse, ValidationErrorResponse

INVALID_BODY = {400: {"description": "Invalid request body", "model": ValidationErrorResponse}}
INVALID_UUID = {400: {"description": "Invalid UUID", "model": ErrorResponse}}
# PUT can fail either way; OpenAPI allows one model per status code.
INVALID_UUID_OR_BODY = {400: {"description": "Invalid UUID or request body"}}
NOT_FOUND = {404: {"description": "No row with this identifier", "model": ErrorResponse}}
STORE_ERROR = {500: {"description": "Store rejected the statement", "model": ErrorResponse}}
