from ..schema.errors import SchemaError, ValidationError
from ..schema.const import MESSAGES
from ..schema.util import is_absent


class Validator(object):
    """ Base for all validators.

    A validator decides whether a single value conforms to one type rule, and optionally allows its absence.
    Validation goes in two phases:

    1. Presence check: an absent value (`None`, or a missing key) fails with "field is required",
        unless the validator is optional: then it's valid right away, and no type check is done.
    2. Type check: a present value is tested with `validate_type()`, and fails with "invalid type for field".

    Validators are stateless: once constructed, the same instance can be used in any number of schemas.

    ```python
    from vouch import StringType

    StringType('user name').validate('Mark')  #-> True
    StringType('user name').validate(None)
    #-> ValidationError: field is required
    StringType('user name', required=False).validate(None)  #-> True
    ```

    :param description: Field level explanation, reported with the contract
    :type description: str|None
    :param required: Whether a value must be provided
    :type required: bool
    :raises SchemaError: `required` is not a boolean
    """

    #: Validator type name, reported with the contract.
    #: Must be overridden in subclasses
    type_name = '???'

    def __init__(self, description=None, required=True):
        if not isinstance(required, bool):
            raise SchemaError('`required` must be a boolean, got {!r}'.format(required))

        self.description = description or ''
        self.required = required

    def check(self, value):
        """ Validate the value and report the outcome as a value.

        :param value: Input value
        :return: `None` if the value is valid, otherwise the (not raised) error
        :rtype: ValidationError|None
        """
        if is_absent(value):
            if self.required:
                return ValidationError(MESSAGES.REQUIRED)
            return None

        if not self.validate_type(value):
            return ValidationError(MESSAGES.INVALID_TYPE)
        return None

    def validate(self, value):
        """ Validate the value

        :param value: Input value
        :return: True
        :raises ValidationError: errors
        """
        error = self.check(value)
        if error is not None:
            raise error
        return True

    def is_valid(self, value):
        """ Test the value without raising

        :rtype: bool
        """
        return self.check(value) is None

    def validate_type(self, value):
        """ Test the type of a value which is known to be present.

        :rtype: bool
        """
        return True

    def get_contract(self):
        """ Describe the validator

        :rtype: dict
        """
        return {
            'type': self.type_name,
            'description': self.description,
            'required': self.required,
        }

    def __repr__(self):
        return '{cls}({0.description!r}{optional})'.format(
            self,
            cls=type(self).__name__,
            optional='' if self.required else ', required=False')

    def __str__(self):
        return self.type_name
