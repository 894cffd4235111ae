"""Tests for the click/typer registry adapter."""

from __future__ import annotations

import textwrap
from pathlib import Path

import click
import pytest
import typer

from helpparity.adapters.click_app import (
    ClickRegistryAdapter,
    is_click_group,
    load_click_command,
    type_display_name,
)
from helpparity.constants import DEFAULT_PARAMETER_SET
from helpparity.exceptions import CommandNotFoundError, ConfigError


@click.group()
def cli() -> None:
    """Root group."""


@cli.command()
@click.argument("name")
@click.option("--count", type=int, default=1)
@click.option("--force", is_flag=True)
@click.option("--mode", type=click.Choice(["a", "b"]), required=True)
@click.option("--secret", hidden=True)
def run(name, count, force, mode, secret) -> None:
    """Run something."""


@cli.group()
def config() -> None:
    """Config commands."""


@config.command("show")
@click.option("--path", type=click.Path())
def config_show(path) -> None:
    """Show config."""


@cli.command(hidden=True)
def internal() -> None:
    """Hidden."""


class TestTypeDisplayName:
    @pytest.mark.parametrize(
        ("param", "expected"),
        [
            (click.Option(["--flag"], is_flag=True), "Switch"),
            (click.Option(["--n"], type=int), "Int"),
            (click.Option(["--ratio"], type=float), "Float"),
            (click.Option(["--name"]), "String"),
            (click.Option(["--pick"], type=click.Choice(["x"])), "Choice"),
            (click.Argument(["src"], type=click.Path()), "Path"),
            (click.Option(["--when"], type=click.DateTime()), "DateTime"),
            (click.Option(["--id"], type=click.UUID), "UUID"),
        ],
    )
    def test_display_names(self, param, expected):
        assert type_display_name(param) == expected


class TestClickRegistryAdapter:
    def test_walks_groups_and_skips_hidden(self):
        adapter = ClickRegistryAdapter(cli)
        assert adapter.list_commands() == ["config", "config show", "run"]

    def test_parameters(self):
        parameters = ClickRegistryAdapter(cli).list_parameters("run")
        by_name = {p.name: p for p in parameters}
        assert list(by_name) == ["count", "force", "mode", "name"]
        assert by_name["name"].is_mandatory
        assert by_name["mode"].is_mandatory
        assert not by_name["count"].is_mandatory
        assert by_name["force"].type_name == "Switch"
        assert by_name["count"].type_name == "Int"
        assert by_name["mode"].parameter_sets == {DEFAULT_PARAMETER_SET: True}

    def test_nested_command_path_normalised(self):
        parameters = ClickRegistryAdapter(cli).list_parameters("CONFIG   show")
        assert [(p.name, p.type_name) for p in parameters] == [("path", "Path")]

    def test_unknown_command(self):
        with pytest.raises(CommandNotFoundError):
            ClickRegistryAdapter(cli).list_parameters("deploy")

    def test_single_command_root(self):
        @click.command("solo")
        @click.option("--level", type=int, required=True)
        def solo(level) -> None:
            pass

        adapter = ClickRegistryAdapter(solo)
        assert adapter.list_commands() == ["solo"]
        assert adapter.list_parameters("solo")[0].is_mandatory

    def test_typer_app(self):
        app = typer.Typer()

        @app.command()
        def deploy(
            environment: str,
            replicas: int = typer.Option(1, "--replicas"),
            dry_run: bool = typer.Option(False, "--dry-run"),
        ) -> None:
            pass

        @app.command()
        def rollback(release: str) -> None:
            pass

        adapter = ClickRegistryAdapter(typer.main.get_command(app))
        assert adapter.list_commands() == ["deploy", "rollback"]
        by_name = {p.name: p for p in adapter.list_parameters("deploy")}
        assert by_name["environment"].is_mandatory
        assert by_name["replicas"].type_name == "Int"
        assert by_name["dry_run"].type_name == "Switch"

    def test_typer_sub_apps_are_walked(self):
        app = typer.Typer()
        config_app = typer.Typer()
        app.add_typer(config_app, name="config")

        @app.command()
        def run(task: str) -> None:
            pass

        @config_app.command("show")
        def show(path: str = typer.Option("", "--path")) -> None:
            pass

        adapter = ClickRegistryAdapter(typer.main.get_command(app))
        assert adapter.list_commands() == ["config", "config show", "run"]
        (task,) = adapter.list_parameters("run")
        assert (task.name, task.type_name, task.is_mandatory) == ("task", "String", True)

    def test_single_command_typer_app_omits_framework_options(self):
        app = typer.Typer()

        @app.command()
        def main(
            target: str,
            force: bool = typer.Option(False, "--force"),
        ) -> None:
            pass

        adapter = ClickRegistryAdapter(typer.main.get_command(app))
        parameters = adapter.list_parameters(adapter.list_commands()[0])
        assert [(p.name, p.type_name) for p in parameters] == [
            ("force", "Switch"),
            ("target", "String"),
        ]

    def test_eager_click_options_omitted(self):
        @click.command("tool")
        @click.version_option("1.0")
        @click.option("--level", type=int)
        def tool(level) -> None:
            pass

        parameters = ClickRegistryAdapter(tool).list_parameters("tool")
        assert [p.name for p in parameters] == ["level"]


class TestLoadClickCommand:
    def test_malformed_target(self):
        with pytest.raises(ConfigError, match="package.module:attr"):
            load_click_command("no_colon_here")

    def test_import_failure(self):
        with pytest.raises(ConfigError, match="Cannot import"):
            load_click_command("helpparity_missing_module:app")

    def test_missing_attribute(self):
        with pytest.raises(ConfigError, match="no attribute"):
            load_click_command("helpparity.constants:does_not_exist")

    def test_wrong_object_type(self):
        with pytest.raises(ConfigError, match="not a click command"):
            load_click_command("helpparity.constants:ENV_PREFIX")

    def test_loads_from_search_path(self, tmp_path: Path):
        module = tmp_path / "hp_sample_cli.py"
        module.write_text(
            textwrap.dedent(
                """
                import typer

                app = typer.Typer()

                @app.command()
                def hello(name: str) -> None:
                    pass

                @app.command()
                def bye() -> None:
                    pass
                """
            )
        )
        command = load_click_command("hp_sample_cli:app", search_path=tmp_path)
        assert is_click_group(command)
        adapter = ClickRegistryAdapter.from_target("hp_sample_cli:app", tmp_path)
        assert adapter.list_commands() == ["bye", "hello"]
