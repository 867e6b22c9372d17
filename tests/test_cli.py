"""
Tests for the CLI entry point and application startup.
"""

from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from conftest import make_settings
from product_service import cli
from product_service.main import create_app


class TestParser:
    """Tests for cli.build_parser()."""

    def test_serve_defaults_to_configured_address(self) -> None:
        args = cli.build_parser().parse_args(["serve"])
        assert args.func is cli.cmd_serve
        assert args.host == cli.settings.http_addr
        assert args.port == cli.settings.http_port

    def test_serve_overrides(self) -> None:
        args = cli.build_parser().parse_args(["serve", "--host", "127.0.0.1", "--port", "9000"])
        assert (args.host, args.port) == ("127.0.0.1", 9000)

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])


class TestCommands:
    """Tests for the CLI subcommands."""

    def test_serve_runs_uvicorn(self) -> None:
        with patch("uvicorn.run") as run:
            cli.main(["serve", "--port", "9001"])
        run.assert_called_once()
        assert run.call_args.args[0] == "product_service.main:app"
        assert run.call_args.kwargs["port"] == 9001

    def test_migrate_applies_schema(self) -> None:
        engine = MagicMock()
        with patch.object(cli, "build_engine", return_value=engine), patch.object(
            cli, "apply_schema"
        ) as apply_schema:
            cli.main(["migrate"])
        apply_schema.assert_called_once_with(engine)
        engine.dispose.assert_called_once()

    def test_check_db_success(self) -> None:
        engine = MagicMock()
        with patch.object(cli, "build_engine", return_value=engine), patch.object(
            cli, "verify_connection"
        ) as verify:
            cli.main(["check-db"])
        verify.assert_called_once_with(engine)

    def test_check_db_failure_exits_nonzero(self) -> None:
        failure = OperationalError("SELECT 1", {}, Exception("connection refused"))
        with patch.object(cli, "build_engine", return_value=MagicMock()), patch.object(
            cli, "verify_connection", side_effect=failure
        ):
            with pytest.raises(SystemExit) as exc_info:
                cli.main(["check-db"])
        assert exc_info.value.code == 1


class TestLifespan:
    """Tests for engine setup and teardown at application startup."""

    def test_startup_builds_and_disposes_engine(self, engine) -> None:
        app = create_app(settings=make_settings())
        with patch("product_service.main.build_engine", return_value=engine), patch(
            "product_service.main.verify_connection"
        ) as verify:
            with TestClient(app) as client:
                assert app.state.engine is engine
                assert client.get("/api/v1/products").status_code == 200
        verify.assert_called_once_with(engine)
        assert app.state.engine is None

    def test_unreachable_database_aborts_startup(self) -> None:
        engine = MagicMock()
        app = create_app(settings=make_settings())
        failure = OperationalError("SELECT 1", {}, Exception("connection refused"))
        with patch("product_service.main.build_engine", return_value=engine), patch(
            "product_service.main.verify_connection", side_effect=failure
        ):
            with pytest.raises(OperationalError):
                with TestClient(app):
                    pass
        engine.dispose.assert_called_once()

    def test_injected_engine_left_to_caller(self, engine) -> None:
        app = create_app(settings=make_settings(), engine=engine)
        with patch("product_service.main.build_engine") as build:
            with TestClient(app):
                pass
        build.assert_not_called()
        assert app.state.engine is engine
