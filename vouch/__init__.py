""" Slim declarative validation for events.

Core features:

* Simple: a schema is a plain mapping of field names to validators
* Nested schemas
* Error paths (which field contains the error)
* Reports *all* errors at once, in a stable order
* Unexpected fields are rejected
* Contracts: every schema describes itself as a plain, JSON-friendly structure
* Validators are stateless: share them between schemas freely

```python
from vouch import EventType, SchemaType, StringType, UUIDType, ISO8601Type, ValidationError

im = EventType('IM', {
    'userID': StringType('The ID of the user'),
    'body': SchemaType({
        'text': StringType('the message of the text'),
        'messageID': UUIDType(),
        'timestamp': ISO8601Type(),
    }),
})

try:
    im.validate({'type': 'IM', 'userID': 'mark', 'body': {'text': 1}})
except ValidationError as e:
    e.get_field_errors()
    #-> ['body: text: invalid type for field',
    #    'body: messageID: field is required',
    #    'body: timestamp: field is required']
```

Validators check values, and never transform them.
"""
# Core

from .schema.errors import SchemaError, ValidationError, UnknownEventError

from .schema import SchemaType, EventType

# Validators
from .validators import *

# Registry
from .registry import EventRegistry
