""" Event registry: the named collection of `EventType`s a service knows about.

Given an untyped payload, the registry picks the event by the payload's `type` field and validates against it:

```python
from vouch import EventRegistry, EventType, StringType

registry = EventRegistry([
    EventType('SIMPLE', {'test': StringType('test field')}),
])

registry.validate({'type': 'SIMPLE', 'test': 'hello'})  #-> True
registry.validate({'type': 'SMS'})
#-> UnknownEventError: invalid event type: 'SMS'
```
"""

from collections.abc import Mapping

from .schema import EventType
from .schema.const import MESSAGES, DISCRIMINATOR
from .schema.errors import SchemaError, UnknownEventError


class EventRegistry(Mapping):
    """ Read-only mapping of event names to `EventType`s.

    :param events: Events to register
    :type events: Iterable[EventType]
    :raises SchemaError: Duplicate event name
    """

    def __init__(self, events=()):
        self._events = {}
        for event in events:
            self.register(event)

    def register(self, event):
        """ Register one more event.

        Registries are filled once, during initialization.

        :type event: EventType
        :rtype: EventType
        :raises SchemaError: not an `EventType`, or the name is already taken
        """
        if not isinstance(event, EventType):
            raise SchemaError('Only events can be registered, got {!r}'.format(event))
        if event.name in self._events:
            raise SchemaError('Event {!r} is already registered'.format(event.name))

        self._events[event.name] = event
        return event

    def __getitem__(self, name):
        return self._events[name]

    def __iter__(self):
        return iter(self._events)

    def __len__(self):
        return len(self._events)

    def get_event(self, name):
        """ Get an event by name

        :type name: str
        :rtype: EventType
        :raises UnknownEventError: no such event
        """
        try:
            return self._events[name]
        except (KeyError, TypeError):
            raise UnknownEventError(MESSAGES.INVALID_EVENT_TYPE, name)

    def identify(self, payload):
        """ Find the event the payload claims to be.

        :param payload: Input value
        :rtype: EventType
        :raises UnknownEventError: the payload does not name an event, or names an unknown one
        """
        name = payload.get(DISCRIMINATOR) if isinstance(payload, Mapping) else None
        if not name:
            raise UnknownEventError(MESSAGES.MISSING_ARGUMENTS)
        return self.get_event(name)

    def validate(self, payload):
        """ Identify the event and validate the payload against it.

        :param payload: Input value
        :return: True
        :raises UnknownEventError: the event could not be identified
        :raises ValidationError: the payload is invalid
        """
        return self.identify(payload).validate(payload)

    def get_contract(self):
        """ Contracts of all events, by name

        :rtype: dict
        """
        return {name: event.get_contract()
                for name, event in self._events.items()}

    def __repr__(self):
        return '{cls}({names})'.format(
            cls=type(self).__name__,
            names=', '.join(map(repr, self._events)))
