import json
import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from mcp_editor.app import app, get_config_manager
from mcp_editor.mcp_module import ConfigManager

VALID = {
    "mcpServers": {
        "time": {"command": "uvx", "args": ["mcp-server-time"]},
        "slack": {
            "command": "npx",
            "args": ["-y", "@modelcontextprotocol/server-slack"],
            "env": {"SLACK_BOT_TOKEN": "xoxb"},
            "disabled": True,
        },
    }
}


class BackendApiTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "claude_desktop_config.json"
        manager = ConfigManager(config_path=self.path)
        app.dependency_overrides[get_config_manager] = lambda: manager
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()
        self._tmp.cleanup()

    def test_get_config_without_file(self):
        response = self.client.get("/api/config")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"mcpServers": {}})

    def test_save_and_load(self):
        response = self.client.post("/api/config", json=VALID)
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertTrue(payload["success"])
        self.assertEqual(payload["message"], "Configuration saved successfully")

        self.assertEqual(self.client.get("/api/config").json(), VALID)

    def test_save_reports_backup_path(self):
        self.client.post("/api/config", json={"mcpServers": {}})
        response = self.client.post("/api/config", json=VALID)
        backup = response.json()["data"]["backup"]
        self.assertIn(".backup.", backup)
        self.assertEqual(json.loads(Path(backup).read_text(encoding="utf-8")), {"mcpServers": {}})

    def test_invalid_config_returns_400_and_keeps_file(self):
        self.client.post("/api/config", json=VALID)
        before = self.path.read_bytes()

        response = self.client.post(
            "/api/config", json={"mcpServers": {"bad": {"command": 42}}}
        )

        self.assertEqual(response.status_code, 400)
        payload = response.json()
        self.assertFalse(payload["success"])
        self.assertEqual(payload["message"], "Invalid configuration")
        self.assertTrue(payload["data"]["errors"])
        self.assertEqual(self.path.read_bytes(), before)

    def test_non_json_body_returns_400(self):
        response = self.client.post(
            "/api/config", content=b"not json", headers={"Content-Type": "application/json"}
        )
        self.assertEqual(response.status_code, 400)
        self.assertFalse(response.json()["success"])

    def test_malformed_file_returns_500(self):
        self.path.write_text("{oops", encoding="utf-8")
        response = self.client.get("/api/config")
        self.assertEqual(response.status_code, 500)
        payload = response.json()
        self.assertFalse(payload["success"])
        self.assertTrue(payload["message"].startswith("Failed to load config:"))

    def test_full_config_keeps_other_fields(self):
        self.path.write_text(
            json.dumps({"theme": "dark", "mcpServers": {}}), encoding="utf-8"
        )
        self.client.post("/api/config", json=VALID)

        full = self.client.get("/api/config/full").json()
        self.assertEqual(full["theme"], "dark")
        self.assertEqual(full["mcpServers"], VALID["mcpServers"])
        self.assertEqual(self.client.get("/api/config").json(), VALID)

    def test_null_mcp_servers_section_reads_as_empty(self):
        self.path.write_text(json.dumps({"mcpServers": None}), encoding="utf-8")
        response = self.client.get("/api/config")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"mcpServers": {}})

    def test_config_path(self):
        response = self.client.get("/api/config/path")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"path": str(self.path), "exists": False})

    def test_config_info(self):
        self.client.post("/api/config", json=VALID)
        info = self.client.get("/api/config/info").json()
        self.assertEqual(info["path"], str(self.path))
        self.assertEqual(info["scope"], "custom")
        self.assertTrue(info["exists"])
        self.assertEqual(
            [loc["scope"] for loc in info["locations"]], ["custom", "desktop", "user"]
        )

    def test_backups_listing(self):
        self.assertEqual(self.client.get("/api/config/backups").json(), {"backups": []})
        self.client.post("/api/config", json=VALID)
        self.client.post("/api/config", json=VALID)
        backups = self.client.get("/api/config/backups").json()["backups"]
        self.assertEqual(len(backups), 1)
        self.assertTrue(backups[0]["name"].startswith("claude_desktop_config.json.backup."))


class PresetApiTests(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)

    def test_list_presets(self):
        response = self.client.get("/api/presets")
        self.assertEqual(response.status_code, 200)
        presets = response.json()["presets"]
        self.assertTrue(presets)
        self.assertIn("config", presets[0])

    def test_filter_by_category(self):
        presets = self.client.get("/api/presets", params={"category": "data"}).json()["presets"]
        self.assertTrue(presets)
        self.assertTrue(all(p["category"] == "data" for p in presets))

    def test_categories(self):
        categories = self.client.get("/api/presets/categories").json()["categories"]
        self.assertIn("utility", categories)

    def test_get_preset_by_id(self):
        response = self.client.get("/api/presets/github")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["id"], "github")

    def test_unknown_preset_is_404(self):
        response = self.client.get("/api/presets/nope")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(
            response.json(), {"success": False, "message": "Preset 'nope' not found"}
        )

    def test_search_presets(self):
        response = self.client.get("/api/presets/search/sql")
        self.assertEqual(response.status_code, 200)
        ids = [p["id"] for p in response.json()["presets"]]
        self.assertIn("sqlite", ids)

    def test_search_with_encoded_slash(self):
        response = self.client.get("/api/presets/search/modelcontextprotocol%2Fserver")
        self.assertEqual(response.status_code, 200)
        ids = [p["id"] for p in response.json()["presets"]]
        self.assertIn("filesystem", ids)

    def test_health(self):
        self.assertEqual(self.client.get("/api/health").json()["status"], "ok")

    def test_gui_is_served(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertIn("MCP Config Editor", response.text)


if __name__ == "__main__":
    unittest.main()
