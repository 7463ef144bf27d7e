import os
import tempfile
import unittest

from duckduckgo_mcp.config import SearchServerConfig


class TestSearchServerConfig(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)

    def _write(self, text: str) -> str:
        path = os.path.join(self._tmp.name, "config.yaml")
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def test_defaults(self) -> None:
        config = SearchServerConfig.from_environment({})
        self.assertEqual(config.per_second_limit, 1)
        self.assertEqual(config.per_month_limit, 15000)
        self.assertEqual(config.transport, "stdio")
        self.assertEqual(config.log_level, "INFO")

    def test_environment_overrides(self) -> None:
        config = SearchServerConfig.from_environment({
            "DDG_RATE_LIMIT_PER_SECOND": "5",
            "DDG_RATE_LIMIT_PER_MONTH": "100",
            "MCP_TRANSPORT": "SSE",
            "MCP_HOST": "127.0.0.1",
            "MCP_PORT": "8080",
            "LOG_LEVEL": "debug",
        })
        self.assertEqual(config.per_second_limit, 5)
        self.assertEqual(config.per_month_limit, 100)
        self.assertEqual(config.transport, "sse")
        self.assertEqual(config.host, "127.0.0.1")
        self.assertEqual(config.port, 8080)
        self.assertEqual(config.log_level, "DEBUG")

    def test_yaml_file(self) -> None:
        path = self._write("per_second_limit: 2\nper_month_limit: 500\n")
        config = SearchServerConfig.from_environment({"DDG_MCP_CONFIG": path})
        self.assertEqual(config.per_second_limit, 2)
        self.assertEqual(config.per_month_limit, 500)

    def test_environment_wins_over_file(self) -> None:
        path = self._write("per_second_limit: 2\nper_month_limit: 500\n")
        config = SearchServerConfig.from_environment({
            "DDG_MCP_CONFIG": path,
            "DDG_RATE_LIMIT_PER_MONTH": "42",
        })
        self.assertEqual(config.per_second_limit, 2)
        self.assertEqual(config.per_month_limit, 42)

    def test_unknown_file_keys_ignored(self) -> None:
        path = self._write("per_second_limit: 3\nregion: de-de\n")
        with self.assertLogs("duckduckgo_mcp.config", level="WARNING") as logs:
            config = SearchServerConfig.from_environment({"DDG_MCP_CONFIG": path})
        self.assertEqual(config.per_second_limit, 3)
        self.assertIn("region", logs.output[0])

    def test_file_must_be_mapping(self) -> None:
        path = self._write("- 1\n- 2\n")
        with self.assertRaises(ValueError):
            SearchServerConfig.from_environment({"DDG_MCP_CONFIG": path})

    def test_invalid_limits_rejected(self) -> None:
        for value in (0, -1, 2.5, "abc", True):
            with self.assertRaises(ValueError):
                SearchServerConfig(per_second_limit=value)

    def test_unsupported_transport_rejected(self) -> None:
        with self.assertRaises(ValueError):
            SearchServerConfig(transport="websocket")


if __name__ == "__main__":
    unittest.main()
