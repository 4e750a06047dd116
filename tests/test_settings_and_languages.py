import os
import unittest
from unittest.mock import patch

import pydantic

from config.settings import ClientSettings, Settings
from models.languages import (
    LANGUAGE_OPTIONS,
    get_language_label,
    is_valid_source_language,
    is_valid_target_language,
    source_language_codes,
    target_language_codes,
)


class TestSettings(unittest.TestCase):
    def test_missing_api_key_fails(self):
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(pydantic.ValidationError):
                Settings(_env_file=None)

    def test_reads_environment(self):
        env = {
            "OPENAI_API_KEY": "sk-test",
            "OPENAI_MODEL": "gpt-test",
            "PORT": "8080",
            "ALLOWED_ORIGINS": '["http://localhost:5173"]',
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(settings.openai_api_key, "sk-test")
        self.assertEqual(settings.openai_model, "gpt-test")
        self.assertEqual(settings.port, 8080)
        self.assertEqual(settings.allowed_origins, ["http://localhost:5173"])
        self.assertIsNone(settings.openai_base_url)

    def test_client_settings_do_not_need_api_key(self):
        with patch.dict(os.environ, {"TRANSLATION_SERVICE_URL": "http://svc:9000"}, clear=True):
            settings = ClientSettings(_env_file=None)
        self.assertEqual(settings.translation_service_url, "http://svc:9000")
        self.assertEqual(settings.default_source_language, "auto")
        self.assertEqual(settings.default_target_language, "de")
        self.assertEqual(settings.log_level, "WARNING")


class TestLanguages(unittest.TestCase):
    def test_labels(self):
        self.assertEqual(get_language_label("auto"), "Auto-detect")
        self.assertEqual(get_language_label("de"), "German")
        self.assertEqual(get_language_label("xx"), "xx")

    def test_auto_only_valid_as_source(self):
        self.assertTrue(is_valid_source_language("auto"))
        self.assertFalse(is_valid_target_language("auto"))
        self.assertNotIn("auto", target_language_codes())
        self.assertEqual(source_language_codes()[0], "auto")

    def test_closed_enumeration(self):
        self.assertEqual(len(LANGUAGE_OPTIONS), 20)
        for code in ("en", "es", "zh", "pl"):
            self.assertTrue(is_valid_source_language(code))
            self.assertTrue(is_valid_target_language(code))
        self.assertFalse(is_valid_source_language("EN"))
        self.assertFalse(is_valid_target_language(""))


if __name__ == "__main__":
    unittest.main()
