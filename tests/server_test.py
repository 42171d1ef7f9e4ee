import unittest
import uuid

from fastapi.testclient import TestClient

from vouch import EventRegistry, EventType, IntegerType
from vouch.events import default_registry
from vouch.server import Settings, create_app
from vouch.server.app import ROUTES


class ServerTest(unittest.TestCase):
    """ Test the HTTP service """

    def setUp(self):
        self.registry = default_registry()
        self.client = TestClient(create_app(self.registry, Settings(LOG_LEVEL='WARNING')))

    def test_spec(self):
        res = self.client.get('/spec')
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json(), {
            'routes': ROUTES,
            'events': self.registry.get_contract(),
        })

    def test_event_spec(self):
        res = self.client.get('/spec/SIMPLE')
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json(), {
            'test': {'type': 'String', 'description': 'test field', 'required': True},
            'type': {'value': 'SIMPLE', 'required': True},
        })

        res = self.client.get('/spec/SMS')
        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.text, 'Event not found')

    def test_validate_ok(self):
        res = self.client.post('/validate', json={
            'type': 'IM',
            'userID': 'mark',
            'body': {
                'text': 'hello',
                'messageID': str(uuid.uuid4()),
                'timestamp': '2017-06-01T12:30:00.000Z',
            },
        })
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.text, 'ok')
        self.assertIn('X-Correlation-ID', res.headers)

    def test_validate_form(self):
        res = self.client.post('/validate', data={'type': 'SIMPLE', 'test': 'hello'})
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.text, 'ok')

        res = self.client.post('/validate', data={'type': 'SIMPLE', 'test': 'hello', 'rogue': '1'})
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json(), {'errors': ['rogue: unexpected field']})

        res = self.client.post('/validate', data={'test': 'hello'})
        self.assertEqual(res.json(), {'errors': ['missing arguments']})

    def test_validate_invalid(self):
        res = self.client.post('/validate', json={'type': 'SIMPLE', 'test': 1, 'rogue': True})
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json(), {'errors': [
            'test: invalid type for field',
            'rogue: unexpected field',
        ]})

    def test_validate_unknown(self):
        res = self.client.post('/validate', json={'type': 'SMS'})
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json(), {'errors': ['invalid event type']})

    def test_validate_missing_arguments(self):
        for kwargs in ({'json': {'test': 'x'}}, {'json': [1, 2]}, {'content': b'not json'}, {}):
            res = self.client.post('/validate', **kwargs)
            self.assertEqual(res.status_code, 400, kwargs)
            self.assertEqual(res.json(), {'errors': ['missing arguments']}, kwargs)

    def test_correlation_id(self):
        res = self.client.get('/spec', headers={'X-Correlation-ID': 'abc123'})
        self.assertEqual(res.headers['X-Correlation-ID'], 'abc123')

    def test_not_found(self):
        res = self.client.get('/nothing/here')
        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.text, 'Nothing found at that address')

        # Known paths, unsupported methods
        for method, path in (('post', '/spec'), ('get', '/validate'), ('delete', '/spec/IM')):
            res = getattr(self.client, method)(path)
            self.assertEqual((res.status_code, res.text), (404, 'Nothing found at that address'), (method, path))

    def test_custom_registry(self):
        registry = EventRegistry([EventType('COUNT', {'n': IntegerType()})])
        client = TestClient(create_app(registry, Settings(LOG_LEVEL='WARNING')))

        self.assertEqual(client.post('/validate', json={'type': 'COUNT', 'n': 1}).text, 'ok')
        self.assertEqual(client.post('/validate', json={'type': 'COUNT', 'n': 1.5}).json(),
                         {'errors': ['n: invalid type for field']})
        self.assertEqual(client.get('/spec/IM').status_code, 404)
