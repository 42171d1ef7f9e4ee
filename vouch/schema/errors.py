"""
When validating user input, a `SchemaType` collects all errors
and reports these after the whole input value is validated. This makes sure that you can report *all* errors at once.

Every failure is a human-readable message; nested failures are prefixed with the path to the offending field:

```python
from vouch import SchemaType, StringType, ValidationError

schema = SchemaType({'user': SchemaType({'name': StringType()})})

try:
    schema.validate({'user': {}})
except ValidationError as e:
    e.get_field_errors()  #-> ['user: name: field is required']
```

All errors are available right at the top-level:

```python
from vouch import ValidationError, SchemaError
```
"""


class BaseError(Exception):
    """ Base validation exception """


class SchemaError(BaseError):
    """ Schema error (e.g. malformed) """


class ValidationError(BaseError):
    """ Validation error: an ordered list of failure messages.

    A validator creates a fresh `ValidationError` for its own level, and the enclosing
    `SchemaType` copies its messages upward, each prefixed with the field name.
    The error never merges itself into another one.

    `ValidationError` is iterable, which allows to process the messages directly:

    ```python
    try:
        event.validate(payload)
    except ValidationError as e:
        for message in e:
            print(message)  #-> 'body: text: invalid type for field'
    ```

    :param messages: Initial messages
    :type messages: str
    """

    def __init__(self, *messages):
        super().__init__('failed input validation')

        #: The collected messages
        self._messages = list(messages)

    def add_field_error(self, message):
        """ Append a message.

        :type message: str
        """
        self._messages.append(message)

    def get_field_errors(self):
        """ Get a copy of the collected messages, in the order they were added.

        :rtype: list[str]
        """
        return list(self._messages)

    def __iter__(self):
        return iter(self._messages)

    def __repr__(self):
        return '{cls}({messages})'.format(
            cls=type(self).__name__,
            messages=', '.join(map(repr, self._messages)))

    def __str__(self):
        return '{}: {}'.format(self.args[0], '; '.join(self._messages))


class UnknownEventError(BaseError):
    """ No event could be identified for the given input.

    Raised by `EventRegistry` before any validation happens.

    :param message: Reason
    :type message: str
    :param name: The event name that was looked up, if any
    :type name: str|None
    """

    def __init__(self, message, name=None):
        super().__init__(message, name)
        self.message = message
        self.name = name

    def __str__(self):
        return self.message if self.name is None else '{}: {!r}'.format(self.message, self.name)
