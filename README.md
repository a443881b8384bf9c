# oasguard

Building blocks for checking HTTP traffic against an OpenAPI 3 contract.

`oasguard` gives you:

- `oasguard.model`: a small model of the parts of an OpenAPI document that
  matter when checking traffic (`PathItem`, `Operation`, `Parameter`, `Schema`,
  `MediaType`, `RequestBody`, `Response`, `Responses`, `Position`) together with
  plain `Request` and `HttpResponse` objects;
- `oasguard.operations`: helpers that pick the operation and its parameters
  for a request, and split a `Content-Type` header into media type, charset and
  boundary;
- `oasguard.params`: decoders for the parameter serialisation styles OpenAPI
  defines (form, space and pipe delimited, deepObject, label, matrix and simple),
  plus helpers that rewrite values into form, space or pipe delimited style;
- `oasguard.errors`: `ValidationError` and `SchemaValidationFailure`, plus the
  "how to fix" advice texts;
- `oasguard.query_errors`, `oasguard.param_errors` and `oasguard.http_errors`:
  a factory function for each failure a query, header, cookie or path parameter
  check, or a request or response check, can report;
- `oasguard.constants`: the names of validation kinds, styles, delimiters and
  schema types used throughout.

The package has no runtime dependencies.

## Installation

```
pip install oasguard
```

## Describing a contract and a request

The model is built directly in Python:

```python
from oasguard.model import Operation, Parameter, PathItem, Request, Schema
from oasguard.operations import extract_operation, extract_params_for_operation

cups = Parameter(name="coffeeCups", location="header", required=True,
                 schema=Schema(type="integer", enum=[1, 2, 99]))
item = PathItem(get=Operation(operation_id="drinks", parameters=[cups]))

request = Request(method="GET", path="/vending/drinks", headers={"coffeecups": "2"})

extract_operation(request, item).operation_id       # 'drinks'
extract_params_for_operation(request, item)         # path-level params, then the operation's
request.header("CoffeeCups")                        # '2' (case-insensitive)
```

`Parameter.is_exploded()` is true only when `explode` was set to `True`.

## Decoding parameter values

```python
from oasguard.params import (
    construct_map_from_csv,
    construct_kv_from_csv,
    construct_kv_from_matrix_csv,
    explode_query_value,
    collapse_csv_into_form_style,
)

construct_map_from_csv("pink,true,number,2")
# {'pink': True, 'number': 2}

construct_kv_from_csv("milk=123,sugar=true")
# {'milk': 123, 'sugar': True}

construct_kv_from_matrix_csv("id=1234;vegetarian=false")
# {'id': 1234, 'vegetarian': False}

explode_query_value("a|b|c", "pipeDelimited")
# ['a', 'b', 'c']

collapse_csv_into_form_style("fruit", "apple,pear")
# '&fruit=apple&fruit=pear'
```

Values are cast as they are decoded: `true` and `false` become booleans,
numbers written without a decimal point become `int`, numbers with one become
`float`, and anything else stays a string. `construct_map_from_csv` drops a
lone trailing key; the pipe, space and form decoders that take `QueryParam`
objects raise `ValueError` when a value does not hold whole key/value pairs.

## Reading a content type

```python
from oasguard.operations import extract_content_type

extract_content_type("multipart/form-data; charset=utf-8; boundary=xyz")
# ('multipart/form-data', 'utf-8', 'xyz')
```

## Reporting failures

Each factory returns a `ValidationError`, which is an exception and can be
raised, logged or collected:

```python
from oasguard.param_errors import incorrect_header_param_enum

error = incorrect_header_param_enum(cups, "1200", cups.schema)
error.message     # "Header parameter 'coffeeCups' does not match allowed values"
error.how_to_fix  # "Instead of '1200', use one of the allowed values: '1, 2, 99'"
```

`str(error)` gives a one-line summary with the message and reason, any schema
failures, and the line and column in the spec when both are known.
`is_path_missing_error()` is true when the error's validation type is `path`
and its sub-type is `missing`.

`response_content_type_not_found` raises `ValueError` if the operation has no
responses, and `KeyError` if the requested code (or the default response) is
not defined.

## What it does not do

`oasguard` provides the pieces a validator is built from, not a validator:

- it does not read OpenAPI documents from YAML or JSON; the model is built by hand;
- it does not match a request path against the paths of a document;
- it does not run whole-request checks of query, header, cookie or path
  parameters, nor validate values against JSON schemas; it only decodes the
  values and builds the errors such checks report.

## Running the tests

```
pip install oasguard[test]
pytest
```