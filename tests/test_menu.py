"""Tests for the menu driver (cli/menu.py)."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest

from crud_client.cli.menu import (
    MainCommand,
    MenuDriver,
    ResourceCommand,
    parse_command,
    resource_labels,
)

Scripted = Callable[..., Any]


def _fake_flows(noun: str, plural: str) -> MagicMock:
    flows = MagicMock()
    flows.noun = noun
    flows.plural = plural
    return flows


def _driver(scripted: Scripted, *lines: str) -> tuple[MenuDriver, MagicMock, MagicMock, Any]:
    prompter, reader = scripted(*lines)
    users = _fake_flows("user", "users")
    contacts = _fake_flows("contact", "contacts")
    return MenuDriver(prompter, users=users, contacts=contacts), users, contacts, reader


class TestParseCommand:
    def test_exact_match(self) -> None:
        assert parse_command(MainCommand, "2") is MainCommand.CONTACTS

    @pytest.mark.parametrize("text", ["", "3", "01", "users", "-1"])
    def test_unknown(self, text: str) -> None:
        assert parse_command(MainCommand, text) is None

    def test_resource_labels(self) -> None:
        labels = resource_labels("contact", "contacts")
        assert labels[ResourceCommand.FIND] == "Obtain contact by ID"
        assert labels[ResourceCommand.LIST] == "Obtain all contacts"
        assert labels[ResourceCommand.BACK] == "Exit to main menu"


class TestMainMenu:
    def test_exit_immediately(
        self, scripted: Scripted, capsys: pytest.CaptureFixture[str]
    ) -> None:
        driver, users, contacts, reader = _driver(scripted, "0")

        driver.run()

        out = capsys.readouterr().out
        assert "--- Main Menu ---" in out
        assert "1. Access Users CRUD" in out
        assert "Ending client process" in out
        assert reader.remaining == 0
        assert not users.method_calls
        assert not contacts.method_calls

    def test_invalid_option_redisplays_menu(
        self, scripted: Scripted, capsys: pytest.CaptureFixture[str]
    ) -> None:
        driver, *_ = _driver(scripted, "7", "abc", "0")

        driver.run()

        captured = capsys.readouterr()
        assert captured.err.count("The option typed is not valid") == 2
        assert captured.out.count("--- Main Menu ---") == 3

    def test_end_of_input_propagates(self, scripted: Scripted) -> None:
        driver, *_ = _driver(scripted, "1")
        with pytest.raises(EOFError):
            driver.run()


class TestResourceMenus:
    def test_users_menu_dispatch(
        self, scripted: Scripted, capsys: pytest.CaptureFixture[str]
    ) -> None:
        driver, users, contacts, _ = _driver(
            scripted, "1", "1", "2", "3", "4", "5", "0", "0"
        )

        driver.run()

        users.find_by_id.assert_called_once_with()
        users.obtain_all.assert_called_once_with()
        users.create.assert_called_once_with()
        users.update.assert_called_once_with()
        users.delete.assert_called_once_with()
        assert not contacts.method_calls

        out = capsys.readouterr().out
        assert "--- Users Menu ---" in out
        assert "Exiting users menu" in out
        assert out.index("Exiting users menu") < out.index("Ending client process")

    def test_contacts_menu_returns_to_main(
        self, scripted: Scripted, capsys: pytest.CaptureFixture[str]
    ) -> None:
        driver, users, contacts, _ = _driver(scripted, "2", "2", "0", "2", "0", "0")

        driver.run()

        assert contacts.obtain_all.call_count == 1
        out = capsys.readouterr().out
        assert out.count("--- Contact Menu ---") == 3
        assert "5. Delete contact" in out
        assert out.count("Exiting contact menu") == 2

    def test_invalid_option_in_resource_menu(
        self, scripted: Scripted, capsys: pytest.CaptureFixture[str]
    ) -> None:
        driver, users, *_ = _driver(scripted, "1", "6", "0", "0")

        driver.run()

        assert not users.method_calls
        assert "The option typed is not valid" in capsys.readouterr().err
