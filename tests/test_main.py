import importlib

from todo_app import main


def test_import_builds_no_application():
    module = importlib.reload(main)
    assert not hasattr(module, "app")


def test_run_starts_uvicorn_with_the_factory(monkeypatch):
    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda target, **kwargs: calls.append((target, kwargs)))

    main.run()

    target, kwargs = calls[0]
    assert target == "todo_app.main:create_app"
    assert kwargs["factory"] is True
    assert kwargs["port"] == main.get_settings().PORT
