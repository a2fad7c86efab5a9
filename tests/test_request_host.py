from __future__ import annotations

from domain.host import InputPrompt, NotifyOptions
from infrastructure.fs_repo import FsRepository
from infrastructure.request_host import RequestHost


def test_prompt_answers_default_and_cancel() -> None:
    host = RequestHost(answers={"className": "LoginSteps", "packageName": None})

    assert host.prompt_input(InputPrompt(key="className", prompt="?", value="X")) == "LoginSteps"
    assert host.prompt_input(InputPrompt(key="packageName", prompt="?", value="com.x")) is None
    assert host.prompt_input(InputPrompt(key="fileName", prompt="?", value="Steps.java")) == "Steps.java"


def test_notify_returns_only_offered_choice() -> None:
    host = RequestHost(answers={"followUp": "View Output", "continueNonFeature": "Maybe"})

    selected = host.notify("done", NotifyOptions(key="followUp", choices=("Create File", "View Output")))
    rejected = host.notify("continue?", NotifyOptions(key="continueNonFeature", choices=("Yes", "No")))
    plain = host.notify("plain message")

    assert selected == "View Output"
    assert rejected is None
    assert plain is None
    assert [item.selected for item in host.notifications] == ["View Output", None, None]
    assert host.notifications[2].level == "info"


def test_write_file_without_project_root_fails() -> None:
    host = RequestHost()

    assert host.write_file("Steps.java", "x") is False
    assert host.written_files[0].success is False


def test_write_file_records_result(tmp_path, caplog) -> None:
    host = RequestHost(fs_repo=FsRepository(str(tmp_path)))

    with caplog.at_level("INFO", logger="infrastructure.request_host"):
        assert host.write_file("steps/Steps.java", "class Steps {}") is True
    assert str(tmp_path.resolve()) in caplog.text
    assert host.write_file("../escape.java", "x") is False
    assert (tmp_path / "steps" / "Steps.java").read_text(encoding="utf-8") == "class Steps {}"
    assert [item.success for item in host.written_files] == [True, False]


def test_selection_and_side_effects() -> None:
    host = RequestHost(document_text="Given a", selection_text="", document_name="a.feature")

    host.write_clipboard("code")
    host.show_preview("code", "java")

    assert host.get_active_text() == "Given a"
    assert host.get_selection() is None
    assert host.get_document_name() == "a.feature"
    assert host.clipboard == "code"
    assert (host.preview, host.preview_language) == ("code", "java")
