import copy

import pytest

from src.utils.validators import check_required_env

ALL_PRESENT = {"DISCORD_TOKEN": "t", "APPLICATION_ID": "a", "N8N_WEBHOOK_URL": "u"}


def test_returns_empty_list_when_all_present():
    assert check_required_env(ALL_PRESENT) == []


def test_returns_names_of_missing_vars():
    assert check_required_env({"DISCORD_TOKEN": "t"}) == ["APPLICATION_ID", "N8N_WEBHOOK_URL"]


def test_empty_snapshot_reports_everything_in_declared_order():
    assert check_required_env({}) == ["DISCORD_TOKEN", "APPLICATION_ID", "N8N_WEBHOOK_URL"]


def test_none_snapshot_does_not_raise():
    assert check_required_env(None) == ["DISCORD_TOKEN", "APPLICATION_ID", "N8N_WEBHOOK_URL"]


def test_empty_string_counts_as_missing():
    env = dict(ALL_PRESENT, DISCORD_TOKEN="")
    assert check_required_env(env) == ["DISCORD_TOKEN"]


@pytest.mark.parametrize("key", ["DISCORD_TOKEN", "APPLICATION_ID", "N8N_WEBHOOK_URL"])
@pytest.mark.parametrize("falsy", [None, "", False, 0])
def test_single_falsy_key_is_reported_alone(key, falsy):
    env = dict(ALL_PRESENT, **{key: falsy})
    assert check_required_env(env) == [key]


def test_order_follows_declaration_not_snapshot():
    env = {"N8N_WEBHOOK_URL": "", "EXTRA": "x", "DISCORD_TOKEN": None}
    assert check_required_env(env) == ["DISCORD_TOKEN", "APPLICATION_ID", "N8N_WEBHOOK_URL"]


def test_extra_keys_are_ignored():
    env = dict(ALL_PRESENT, GUILD_ID="", NODE_ENV=None)
    assert check_required_env(env) == []


def test_is_idempotent_and_does_not_mutate_input():
    env = {"DISCORD_TOKEN": "t", "N8N_WEBHOOK_URL": ""}
    before = copy.deepcopy(env)

    first = check_required_env(env)
    second = check_required_env(env)

    assert first == second == ["APPLICATION_ID", "N8N_WEBHOOK_URL"]
    assert env == before
