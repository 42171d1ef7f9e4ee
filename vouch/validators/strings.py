import re

from .base import Validator


class UUIDType(Validator):
    """ Check that the value is a UUID string in its canonical textual form.

    Versions 1 to 5 with the RFC 4122 variant are accepted, in any letter case:

    ```python
    from vouch import UUIDType

    schema = UUIDType('message id')
    schema.validate('3f2504e0-4f89-41d3-9a0c-0305e82c3301')  #-> True
    schema.validate('3F2504E0-4F89-41D3-9A0C-0305E82C3301')  #-> True
    schema.validate('3f2504e04f8941d39a0c0305e82c3301')
    #-> ValidationError: invalid type for field
    ```
    """

    type_name = 'UUID'

    #: UUID format
    rex = re.compile(r'^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$', re.IGNORECASE)

    def validate_type(self, value):
        if not isinstance(value, str):
            return False
        # `$` alone matches before a trailing newline
        return self.rex.fullmatch(value) is not None


__all__ = ('UUIDType',)
