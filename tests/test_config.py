"""Tests for :mod:`roomq.config`."""

from unittest import TestCase

from roomq.config import Settings, is_truthy
from roomq.exceptions import ConfigurationError


class TestSettings(TestCase):
    """Settings are loaded from a mapping."""

    def setUp(self):
        self.config = {
            'ROOMQ_CLIENT_ID': 'shop1',
            'ROOMQ_JWT_SECRET': 's3cret',
            'ROOMQ_TICKET_ISSUER': 'https://queue.example.com/ticket',
        }

    def test_from_mapping(self):
        settings = Settings.from_mapping(self.config)
        self.assertEqual(settings, Settings(
            'shop1', 's3cret', 'https://queue.example.com/ticket', False
        ))

    def test_debug(self):
        self.config['ROOMQ_DEBUG'] = 'true'
        self.assertTrue(Settings.from_mapping(self.config).debug)

    def test_missing(self):
        """Each required parameter must be set."""
        for key in list(self.config):
            config = dict(self.config)
            config[key] = ''
            with self.assertRaises(ConfigurationError):
                Settings.from_mapping(config)
            del config[key]
            with self.assertRaises(ConfigurationError):
                Settings.from_mapping(config)

    def test_immutable(self):
        settings = Settings.from_mapping(self.config)
        with self.assertRaises(AttributeError):
            settings.client_id = 'other'

    def test_is_truthy(self):
        for value in ['1', 'true', 'Yes', ' on ', True]:
            self.assertTrue(is_truthy(value), value)
        for value in ['0', 'false', '', 'off', False, None]:
            self.assertFalse(is_truthy(value), value)
