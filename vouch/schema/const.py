class MESSAGES:
    """ Error messages reported by the validators """

    #: Value is absent, but the validator requires it
    REQUIRED = 'field is required'

    #: Value is present, but does not satisfy the type predicate
    INVALID_TYPE = 'invalid type for field'

    #: Value is not the expected constant
    UNMATCHED_CONSTANT = 'unmatched constant type'

    #: Input mapping has a key the schema does not declare
    UNEXPECTED_FIELD = 'unexpected field'

    #: Payload carries no event discriminator
    MISSING_ARGUMENTS = 'missing arguments'

    #: Payload names an event nobody registered
    INVALID_EVENT_TYPE = 'invalid event type'


#: Reserved field that names the event kind
DISCRIMINATOR = 'type'
