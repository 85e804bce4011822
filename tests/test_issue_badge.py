import pytest

from scripts import issue_badge


def test_issue_admin_token_opens_with_server_key(guard, settings):
    token = issue_badge.issue(settings.secret_key, "Master Forgers", "Forgemaster", 50, admin=True)
    badge = guard.open_token(token)
    assert badge.is_admin is True
    assert badge.guild_name == "Master Forgers"
    assert badge.level == 50


def test_main_prints_token(monkeypatch, capsys, guard, settings):
    monkeypatch.setattr(issue_badge, "load_dotenv", lambda: None)
    monkeypatch.setenv("BADGE_SECRET_KEY", settings.secret_key)
    issue_badge.main(["--guild", "Iron Hammers", "--rank", "Smith"])
    token = capsys.readouterr().out.strip()
    badge = guard.open_token(token)
    assert badge.rank == "Smith"
    assert badge.is_admin is False


def test_main_requires_server_key(monkeypatch):
    monkeypatch.setattr(issue_badge, "load_dotenv", lambda: None)
    monkeypatch.delenv("BADGE_SECRET_KEY", raising=False)
    with pytest.raises(SystemExit):
        issue_badge.main(["--admin"])


@pytest.mark.parametrize(
    "argv",
    [
        ["--guild", "g" * 65],
        ["--rank", "r" * 65],
        ["--level", "0"],
        ["--level", "10001"],
    ],
)
def test_main_rejects_invalid_badge_fields(monkeypatch, capsys, settings, argv):
    monkeypatch.setattr(issue_badge, "load_dotenv", lambda: None)
    monkeypatch.setenv("BADGE_SECRET_KEY", settings.secret_key)
    with pytest.raises(SystemExit) as exc:
        issue_badge.main(argv)
    assert exc.value.code == 2
    assert "invalid badge fields" in capsys.readouterr().err
