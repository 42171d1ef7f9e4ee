from .base import Validator
from ..schema.errors import ValidationError
from ..schema.const import MESSAGES


class ConstantType(Validator):
    """ Accept only one exact value.

    The check is strict: the value must have the same type and be equal to the constant.
    This is mostly used to pin a discriminator field, see `EventType`.

    ```python
    from vouch import ConstantType

    schema = ConstantType('SMS')
    schema.validate('SMS')  #-> True
    schema.validate('IM')
    #-> ValidationError: unmatched constant type
    schema.validate(None)
    #-> ValidationError: unmatched constant type
    ```

    A constant is always required, and its contract exposes the literal itself:

    ```python
    schema.get_contract()  #-> {'value': 'SMS', 'required': True}
    ```

    :param value: The expected value
    """

    type_name = 'Constant'

    def __init__(self, value):
        super().__init__(None, True)
        # The literal doubles as the description
        self.description = value

    @property
    def value(self):
        """ The expected value """
        return self.description

    def check(self, value):
        # Absence fails the equality check as well
        if type(value) != type(self.value) or value != self.value:
            return ValidationError(MESSAGES.UNMATCHED_CONSTANT)
        return None

    def get_contract(self):
        return {
            'value': self.value,
            'required': True,
        }

    def __repr__(self):
        return '{cls}({0.value!r})'.format(self, cls=type(self).__name__)


__all__ = ('ConstantType',)
