import pytest

from agendamed.errors import DataAccessError
from agendamed.repositories.users import UserRepository
from agendamed.services.user_service import UserService
from conftest import CommitFails


def test_register_then_login_with_matching_password(db, new_user):
    svc = UserService(db)
    user_id = svc.register(new_user())

    user = svc.login("joana", "segredo")
    assert user is not None
    assert user["id"] == user_id
    assert user["name"] == "Joana Magalhães Souza"
    assert user["plano"] == "Unimed"


def test_duplicate_username_fails_and_other_username_succeeds(db, new_user):
    svc = UserService(db)
    svc.register(new_user())

    with pytest.raises(DataAccessError) as exc:
        svc.register(new_user(email="outra@example.com"))
    assert exc.value.message == "Falha ao registrar usuário"

    other_id = svc.register(new_user(username="maria"))
    assert svc.login("maria", "segredo")["id"] == other_id
    assert len(svc.list_users()) == 2


def test_wrong_password_returns_none(db, new_user):
    svc = UserService(db)
    svc.register(new_user())

    assert svc.login("joana", "errada") is None
    assert svc.login("ninguem", "segredo") is None


def test_login_is_exact_match(db, new_user):
    svc = UserService(db)
    svc.register(new_user())

    assert svc.login("Joana", "segredo") is None
    assert svc.login("joana", "SEGREDO") is None


def test_failed_registration_is_rolled_back(db, new_user):
    svc = UserService(db)
    # plano é NOT NULL
    with pytest.raises(DataAccessError):
        svc.register(new_user(plano=None))
    assert svc.list_users() == []


def test_update_and_delete(db, new_user):
    repo = UserRepository(db)
    user_id = UserService(db).register(new_user())

    fields = {**repo.by_id(user_id), "telefone": "11911112222", "plano": "Amil"}
    assert repo.update(user_id, fields) == 1
    updated = repo.by_id(user_id)
    assert updated["telefone"] == "11911112222"
    assert updated["plano"] == "Amil"

    assert repo.delete(user_id) == 1
    assert repo.by_id(user_id) is None
    assert repo.delete(user_id) == 0


def test_commit_failure_on_register_is_data_access_error(db, new_user, monkeypatch):
    monkeypatch.setattr(db, "_conn", CommitFails(db._conn))
    with pytest.raises(DataAccessError) as exc:
        UserService(db).register(new_user())
    assert exc.value.message == "Falha ao registrar usuário"

    monkeypatch.undo()
    assert UserService(db).list_users() == []
