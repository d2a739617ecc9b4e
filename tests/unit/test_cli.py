"""
Unit tests for namestore/cli/ and namestore/app.py

Coverage plan
─────────────
arg parsing    → 5 tests  (no subcommand / gui / list / add / delete)
list command   → 2 tests  (empty store, populated store)
add / delete   → 3 tests
main()         → 5 tests  (exit codes, storage failures, gui dispatch)
AppContext     → 2 tests
"""

import pytest


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _parse(args: list[str]):
    """Call the CLI argument parser and return the parsed namespace."""
    from namestore.cli.main import build_parser
    parser = build_parser()
    return parser.parse_args(args)


@pytest.fixture
def store(tmp_path):
    """Fresh NameStore for CLI command tests."""
    from namestore.store.db import NameStore
    return NameStore(db_path=str(tmp_path / "cli_test.db"))


# ─────────────────────────────────────────────────────────────────────────────
# 1. Argument parsing
# ─────────────────────────────────────────────────────────────────────────────

class TestArgParsing:

    def test_no_subcommand_uses_default_db(self):
        from namestore.app import DEFAULT_DB_PATH
        ns = _parse([])
        assert ns.subcommand is None
        assert ns.db == DEFAULT_DB_PATH
        assert ns.debug is False

    def test_gui_subcommand(self):
        ns = _parse(["--db", "x.db", "gui"])
        assert ns.subcommand == "gui"
        assert ns.db == "x.db"

    def test_add_subcommand_parses_name(self):
        ns = _parse(["add", "Ada Lovelace"])
        assert ns.subcommand == "add"
        assert ns.name == "Ada Lovelace"

    def test_add_accepts_empty_name(self):
        ns = _parse(["add", ""])
        assert ns.name == ""

    def test_delete_subcommand_parses_int_id(self):
        ns = _parse(["delete", "42"])
        assert ns.subcommand == "delete"
        assert ns.id == 42


# ─────────────────────────────────────────────────────────────────────────────
# 2. Commands
# ─────────────────────────────────────────────────────────────────────────────

class TestListCommand:

    def test_list_empty_store(self, store, capsys):
        from namestore.cli.main import cmd_list
        cmd_list(store=store)
        assert "0 names stored." in capsys.readouterr().out

    def test_list_prints_ids_and_names(self, store, capsys):
        from namestore.cli.main import cmd_list
        new_id = store.insert("Grace Hopper")
        cmd_list(store=store)
        out = capsys.readouterr().out
        assert "Grace Hopper" in out
        assert f"[{new_id:>4}]" in out


class TestAddDeleteCommands:

    def test_add_inserts_and_reports_id(self, store, capsys):
        from namestore.cli.main import cmd_add
        new_id = cmd_add(store=store, name="Ada")
        assert store.snapshot()[0].id == new_id
        assert f"[{new_id}] Ada" in capsys.readouterr().out

    def test_delete_removes_record(self, store):
        from namestore.cli.main import cmd_delete
        new_id = store.insert("Ada")
        cmd_delete(store=store, record_id=new_id)
        assert store.snapshot() == ()

    def test_delete_unknown_id_is_silent(self, store):
        from namestore.cli.main import cmd_delete
        store.insert("Ada")
        cmd_delete(store=store, record_id=9999)
        assert [r.name for r in store.snapshot()] == ["Ada"]


# ─────────────────────────────────────────────────────────────────────────────
# 3. main()
# ─────────────────────────────────────────────────────────────────────────────

class TestMain:

    def test_add_then_list_round_trip(self, tmp_path, capsys):
        from namestore.cli.main import main
        db = str(tmp_path / "main.db")
        assert main(["--db", db, "add", "Ada"]) == 0
        assert main(["--db", db, "list"]) == 0
        assert "Ada" in capsys.readouterr().out

    def test_delete_unknown_id_exits_zero(self, tmp_path):
        from namestore.cli.main import main
        assert main(["--db", str(tmp_path / "main.db"), "delete", "7"]) == 0

    def test_storage_failure_exits_one(self, tmp_path, capsys):
        from namestore.cli.main import main
        # A directory cannot be opened as a database file
        code = main(["--db", str(tmp_path), "list"])
        assert code == 1
        assert "Error:" in capsys.readouterr().err

    def test_no_subcommand_launches_gui(self, tmp_path):
        from unittest.mock import patch
        from namestore.cli.main import main
        with patch("namestore.cli.main.cmd_gui", return_value=0) as mock_gui:
            assert main(["--db", str(tmp_path / "main.db")]) == 0
        context = mock_gui.call_args.args[0]
        assert str(context.store.db_path).endswith("main.db")

    def test_gui_storage_failure_exits_one(self, tmp_path, capsys):
        from unittest.mock import patch
        from namestore.cli.main import main
        from namestore.exceptions import StorageUnavailable
        with patch("namestore.cli.main.cmd_gui",
                   side_effect=StorageUnavailable("cannot read")):
            code = main(["--db", str(tmp_path / "main.db"), "gui"])
        assert code == 1
        assert "Error: cannot read" in capsys.readouterr().err


# ─────────────────────────────────────────────────────────────────────────────
# 4. AppContext
# ─────────────────────────────────────────────────────────────────────────────

class TestAppContext:

    def test_create_opens_store_at_configured_path(self, tmp_path):
        from namestore.app import AppConfig, AppContext
        ctx = AppContext.create(AppConfig(db_path=str(tmp_path / "ctx.db")))
        assert ctx.store.db_path == tmp_path / "ctx.db"
        assert ctx.config.window_title == "Names"

    def test_create_expands_user_home(self, tmp_path, monkeypatch):
        from namestore.app import AppConfig, AppContext
        monkeypatch.setenv("HOME", str(tmp_path))
        ctx = AppContext.create(AppConfig(db_path="~/.namestore/names.db"))
        assert ctx.store.db_path == tmp_path / ".namestore" / "names.db"
