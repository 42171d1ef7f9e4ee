from datetime import datetime

from .base import Validator


class ISO8601Type(Validator):
    """ Check that the value is an ISO-8601 UTC timestamp in its canonical form, with milliseconds.

    The string is parsed into a calendar date-time, and then formatted back:
    it's only valid when the result is exactly the same string.
    Hence, a parseable but non-canonical timestamp is rejected:

    ```python
    from vouch import ISO8601Type

    schema = ISO8601Type()
    schema.validate('2017-06-01T12:30:00.000Z')  #-> True
    schema.validate('2017-06-01T12:30:00Z')
    #-> ValidationError: invalid type for field
    schema.validate('2017-02-30T12:30:00.000Z')
    #-> ValidationError: invalid type for field
    ```
    """

    type_name = 'ISO8601'

    #: Parsing format
    format = '%Y-%m-%dT%H:%M:%S.%fZ'

    @staticmethod
    def format_utc(dt):
        """ Format a `datetime` into the canonical form: 'YYYY-MM-DDTHH:MM:SS.sssZ'

        :type dt: datetime
        :rtype: str
        """
        return '{:04d}-{:02d}-{:02d}T{:02d}:{:02d}:{:02d}.{:03d}Z'.format(
            dt.year, dt.month, dt.day,
            dt.hour, dt.minute, dt.second,
            dt.microsecond // 1000)

    def validate_type(self, value):
        if not isinstance(value, str):
            return False

        try:
            dt = datetime.strptime(value, self.format)
        except ValueError:
            return False

        return self.format_utc(dt) == value


__all__ = ('ISO8601Type',)
