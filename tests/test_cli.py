import unittest

from mcp_editor.cli import apply_args, build_parser


class CliTests(unittest.TestCase):
    def test_defaults_leave_environment_alone(self):
        env = {}
        apply_args(build_parser().parse_args([]), env)
        self.assertEqual(env, {})

    def test_options_become_settings_env_vars(self):
        env = {}
        args = build_parser().parse_args(
            ["--host", "0.0.0.0", "--port", "8080", "--config", "/tmp/c.json", "--no-browser"]
        )
        apply_args(args, env)
        self.assertEqual(env["MCP_EDITOR_HOST"], "0.0.0.0")
        self.assertEqual(env["MCP_EDITOR_PORT"], "8080")
        self.assertEqual(env["MCP_EDITOR_CONFIG_PATH"], "/tmp/c.json")
        self.assertEqual(env["MCP_EDITOR_OPEN_BROWSER"], "false")


if __name__ == "__main__":
    unittest.main()
