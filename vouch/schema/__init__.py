from types import MappingProxyType

from .errors import SchemaError, ValidationError
from .const import MESSAGES, DISCRIMINATOR
from .util import is_absent, get_field, iter_fields
from ..validators.base import Validator
from ..validators.values import ConstantType


class SchemaType(Validator):
    """ Validation schema: a composite validator over a set of named fields.

    Each field is governed by its own validator, and since a `SchemaType` is a validator itself,
    schemas nest:

    ```python
    from vouch import SchemaType, StringType, IntegerType, UUIDType

    schema = SchemaType({
        'name': StringType('user name'),
        'age': IntegerType('user age', required=False),
        'session': SchemaType({
            'id': UUIDType(),
        }),
    })

    schema.validate({'name': 'Mark', 'session': {'id': '3f2504e0-4f89-41d3-9a0c-0305e82c3301'}})  #-> True
    ```

    The following rules exist:

    1. Every declared field is validated, in declaration order.
        A failure never stops the check: all sibling fields are always evaluated,
        and every message is collected, prefixed with the field name.
    2. Every input field which is not declared is reported as an "unexpected field", in input order.
    3. Nested schemas report their own relative paths, and the parent prepends its own field name:

        ```python
        schema.validate({'name': 1, 'session': {}, 'admin': True})
        #-> ValidationError:
        #   name: invalid type for field
        #   session: id: field is required
        #   admin: unexpected field
        ```

    A missing nested schema is reported once, as "field is required".
    Any other input which is not a mapping has no fields: every declared field is reported as missing.

    A schema is always required.

    :param fields: Mapping of field names to validators.
        It's copied: the schema is fixed at construction, and the caller's mapping is never modified.
    :type fields: Mapping[str, Validator]
    :raises SchemaError: A field is not mapped to a validator
    """

    type_name = 'Schema'

    def __init__(self, fields):
        super().__init__(None, True)

        for field, validator in fields.items():
            if not isinstance(validator, Validator):
                raise SchemaError('Field {!r} must be mapped to a validator, got {!r}'.format(field, validator))

        self._fields = dict(fields)

    @property
    def fields(self):
        """ Declared fields (read-only)

        :rtype: Mapping[str, Validator]
        """
        return MappingProxyType(self._fields)

    def check(self, value):
        # Presence check
        if is_absent(value):
            return ValidationError(MESSAGES.REQUIRED)

        errors = ValidationError()

        # Declared fields
        for field, validator in self._fields.items():
            error = validator.check(get_field(value, field))
            if error is not None:
                for message in error.get_field_errors():
                    errors.add_field_error('{}: {}'.format(field, message))

        # Rogue fields
        for field in iter_fields(value):
            if field not in self._fields:
                errors.add_field_error('{}: {}'.format(field, MESSAGES.UNEXPECTED_FIELD))

        if errors.get_field_errors():
            return errors
        return None

    def get_contract(self):
        """ Describe the schema: every field mapped to its own contract, recursively.

        :rtype: dict
        """
        return {field: validator.get_contract()
                for field, validator in self._fields.items()}

    def __repr__(self):
        return '{cls}({fields})'.format(
            cls=type(self).__name__,
            fields=', '.join(self._fields))


class EventType(SchemaType):
    """ Event schema: a `SchemaType` that knows which kind of event it describes.

    The event name is pinned with a `ConstantType` under the reserved `type` field,
    so an input only validates when it is exactly this kind of event:

    ```python
    from vouch import EventType, StringType

    sms = EventType('SMS', {
        'text': StringType(),
    })

    sms.validate({'type': 'SMS', 'text': 'Hi!'})  #-> True
    sms.validate({'type': 'IM', 'text': 'Hi!'})
    #-> ValidationError: type: unmatched constant type

    sms.get_contract()
    #-> {'text': {'type': 'String', 'description': '', 'required': True},
    #    'type': {'value': 'SMS', 'required': True}}
    ```

    :param name: Event name
    :type name: str
    :param fields: Mapping of field names to validators
    :type fields: Mapping[str, Validator]
    :raises SchemaError: The reserved `type` field is declared explicitly
    """

    def __init__(self, name, fields):
        if DISCRIMINATOR in fields:
            raise SchemaError('Field {!r} is reserved for the event name'.format(DISCRIMINATOR))

        fields = dict(fields)
        fields[DISCRIMINATOR] = ConstantType(name)
        super().__init__(fields)

        #: Event name
        self.name = name

    def __repr__(self):
        return '{cls}({0.name!r})'.format(self, cls=type(self).__name__)
