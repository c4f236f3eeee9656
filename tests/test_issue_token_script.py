from jose import jwt

from app.core.config import settings
from scripts.issue_token import main


def test_issue_token_for_existing_user(db, make_user, capsys):
    user = make_user(username="operator")
    assert main(["operator"]) == 0
    token = capsys.readouterr().out.strip()
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    assert payload["sub"] == user.id
    assert payload["type"] == "access"


def test_issue_token_for_unknown_user(db, capsys):
    assert main(["nobody"]) == 1
    assert "user not found" in capsys.readouterr().err
