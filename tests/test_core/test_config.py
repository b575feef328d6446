"""Unit tests for the client configuration loader."""

import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from brightcloud.core.config import ClientConfig, get_config_dir, load_client_config
from brightcloud.core.exceptions import ConfigError, CredentialsMissingError


class TestLoadClientConfig(unittest.TestCase):
    """Test YAML loading and environment overrides."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.config_path = Path(self.temp_dir.name) / "client.yaml"

    def tearDown(self):
        self.temp_dir.cleanup()

    def write(self, text: str) -> Path:
        self.config_path.write_text(text)
        return self.config_path

    def test_load_full_config(self):
        path = self.write(
            "credentials:\n"
            "  key: AK\n"
            "  secret: AS\n"
            "service:\n"
            "  base_url: https://bc.example.test/\n"
            "  timeout: 12\n"
        )

        config = load_client_config(path, env={})

        self.assertIsInstance(config, ClientConfig)
        self.assertEqual(config.credential.key, "AK")
        self.assertEqual(config.credential.secret, "AS")
        self.assertEqual(config.base_url, "https://bc.example.test")
        self.assertEqual(config.timeout, 12.0)

    def test_defaults(self):
        path = self.write("credentials:\n  key: AK\n  secret: AS\n")

        config = load_client_config(path, env={})

        self.assertEqual(config.base_url, "http://thor.brightcloud.com")
        self.assertEqual(config.timeout, 30.0)

    def test_environment_overrides_file(self):
        path = self.write("credentials:\n  key: file-key\n  secret: file-secret\n")
        env = {
            "BRIGHTCLOUD_KEY": "env-key",
            "BRIGHTCLOUD_SECRET": "env-secret",
            "BRIGHTCLOUD_BASE_URL": "http://localhost:8080",
        }

        config = load_client_config(path, env=env)

        self.assertEqual(config.credential.key, "env-key")
        self.assertEqual(config.credential.secret, "env-secret")
        self.assertEqual(config.base_url, "http://localhost:8080")

    def test_missing_secret(self):
        path = self.write("credentials:\n  key: AK\n")

        with self.assertRaises(CredentialsMissingError) as ctx:
            load_client_config(path, env={})

        self.assertIn("BRIGHTCLOUD_SECRET", str(ctx.exception))

    def test_missing_file(self):
        with self.assertRaises(ConfigError) as ctx:
            load_client_config(Path(self.temp_dir.name) / "nope.yaml", env={})
        self.assertIn("Config file not found", str(ctx.exception))

    def test_invalid_yaml(self):
        path = self.write("credentials: [unclosed\n")

        with self.assertRaises(ConfigError) as ctx:
            load_client_config(path, env={})

        self.assertIn("Failed to parse client YAML", str(ctx.exception))

    def test_invalid_timeout(self):
        path = self.write(
            "credentials:\n  key: AK\n  secret: AS\nservice:\n  timeout: soon\n"
        )

        with self.assertRaises(ConfigError):
            load_client_config(path, env={})

    def test_section_must_be_mapping(self):
        path = self.write("credentials: AK\n")

        with self.assertRaises(ConfigError):
            load_client_config(path, env={})

    def test_no_file_uses_environment(self):
        missing_default = Path(self.temp_dir.name) / "absent" / "client.yaml"
        env = {"BRIGHTCLOUD_KEY": "AK", "BRIGHTCLOUD_SECRET": "AS"}

        with patch(
            "brightcloud.core.config.get_default_config_path",
            return_value=missing_default,
        ):
            config = load_client_config(env=env)

        self.assertEqual(config.credential.key, "AK")

    def test_example_config_loads(self):
        example = get_config_dir() / "client.example.yaml"
        if not example.exists():
            self.skipTest("example config not shipped with this install")

        config = load_client_config(example, env={})

        self.assertEqual(config.credential.key, "your-consumer-key")

    def test_secret_not_in_repr(self):
        path = self.write("credentials:\n  key: AK\n  secret: topsecret\n")

        config = load_client_config(path, env={})

        self.assertNotIn("topsecret", repr(config))


if __name__ == "__main__":
    unittest.main()
