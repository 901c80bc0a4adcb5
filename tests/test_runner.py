import pytest

from vendomat.runner import ComponentLoadError, load_component, main


def test_load_component_returns_factory_result():
    component = object()
    assert load_component(lambda: component) is component


def test_load_component_wraps_factory_failure():
    def broken():
        raise OSError("missing")

    with pytest.raises(ComponentLoadError) as info:
        load_component(broken)
    assert isinstance(info.value.__cause__, OSError)


def test_load_component_rejects_missing_component():
    with pytest.raises(ComponentLoadError):
        load_component(lambda: None)


class _InterruptingStdin:
    def readline(self):
        raise KeyboardInterrupt


def test_main_runs_until_interrupted(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", _InterruptingStdin())
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Starting refrigeration." in out
    assert "Available items:" in out
    assert out.endswith("Enter item: ")


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2