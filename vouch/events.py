""" Built-in events """

from .schema import EventType, SchemaType
from .validators import StringType, UUIDType, ISO8601Type
from .registry import EventRegistry


#: Instant message
IM = EventType('IM', {
    'userID': StringType('The ID of the user'),
    'body': SchemaType({
        'text': StringType('the message of the text'),
        'messageID': UUIDType(),
        'timestamp': ISO8601Type(),
    }),
})

#: Minimal event, handy for smoke tests
SIMPLE = EventType('SIMPLE', {
    'test': StringType('test field'),
})


def default_registry():
    """ Get a registry with all built-in events

    :rtype: EventRegistry
    """
    return EventRegistry([IM, SIMPLE])
