import unittest
from unittest.mock import patch

import requests
from mcp_server import TODO_API_URL, add_todo, delete_todo, list_todos, toggle_todo


class TestMcpTools(unittest.TestCase):

    @patch("mcp_server.requests.get")
    def test_list_todos(self, mock_get):
        mock_get.return_value.status_code = 200
        mock_get.return_value.json.return_value = [{"id": 1, "completed": False, "body": "Mock Task"}]

        todos = list_todos()
        self.assertIsInstance(todos, list)
        self.assertEqual(todos[0]["body"], "Mock Task")
        mock_get.assert_called_once_with(TODO_API_URL, timeout=10)

    @patch("mcp_server.requests.post")
    def test_add_todo(self, mock_post):
        mock_post.return_value.status_code = 201
        mock_post.return_value.json.return_value = {"id": 2, "completed": False, "body": "New Task"}

        todo = add_todo("New Task")
        self.assertEqual(todo["body"], "New Task")
        mock_post.assert_called_once_with(TODO_API_URL, json={"body": "New Task"}, timeout=10)

    @patch("mcp_server.requests.patch")
    def test_toggle_todo(self, mock_patch):
        mock_patch.return_value.json.return_value = {"id": 2, "completed": True, "body": "New Task"}

        todo = toggle_todo(2)
        self.assertTrue(todo["completed"])
        mock_patch.assert_called_once_with(f"{TODO_API_URL}/2", timeout=10)

    @patch("mcp_server.requests.delete")
    def test_delete_todo(self, mock_delete):
        mock_delete.return_value.json.return_value = {"success": "true"}

        self.assertEqual(delete_todo(2), {"success": "true"})
        mock_delete.assert_called_once_with(f"{TODO_API_URL}/2", timeout=10)

    @patch("mcp_server.requests.delete")
    def test_delete_todo_not_found(self, mock_delete):
        mock_delete.return_value.raise_for_status.side_effect = requests.HTTPError("404 Client Error")

        with self.assertRaises(requests.HTTPError):
            delete_todo(999)


if __name__ == "__main__":
    unittest.main()
