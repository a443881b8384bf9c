"""Names of validation kinds, parameter styles, delimiters and schema types."""

PARAMETER_VALIDATION = "parameter"
PARAMETER_VALIDATION_PATH = "path"
PARAMETER_VALIDATION_QUERY = "query"
PARAMETER_VALIDATION_HEADER = "header"
PARAMETER_VALIDATION_COOKIE = "cookie"
REQUEST_BODY_VALIDATION = "requestBody"
SCHEMA = "schema"
RESPONSE_BODY_VALIDATION = "response"
REQUEST_BODY_CONTENT_TYPE = "contentType"
RESPONSE_BODY_RESPONSE_CODE = "statusCode"

SPACE_DELIMITED = "spaceDelimited"
PIPE_DELIMITED = "pipeDelimited"
DEFAULT_DELIMITED = "default"
MATRIX_STYLE = "matrix"
LABEL_STYLE = "label"
DEEP_OBJECT = "deepObject"
FORM = "form"

PIPE = "|"
COMMA = ","
SPACE = " "
SEMICOLON = ";"
ASTERISK = "*"
PERIOD = "."
EQUALS = "="
SLASH = "/"

INTEGER = "integer"
NUMBER = "number"
OBJECT = "object"
STRING = "string"
ARRAY = "array"
BOOLEAN = "boolean"

HEADER = "header"
COOKIE = "cookie"
PATH = "path"
QUERY = "query"

JSON_CONTENT_TYPE = "application/json"
JSON_TYPE = "json"
CONTENT_TYPE_HEADER = "Content-Type"
CHARSET = "charset"
BOUNDARY = "boundary"
PREFERRED = "preferred"
FAIL_SEGMENT = "**&&FAIL&&**"