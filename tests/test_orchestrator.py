from __future__ import annotations

import pytest

from domain.models import GeneratorConfig
from infrastructure.fs_repo import FsRepository
from infrastructure.request_host import RequestHost
from infrastructure.settings_store import SettingsStore
from services.orchestrator import CONFIGURE, CREATE_FILE, VIEW_OUTPUT, Orchestrator


FEATURE_TEXT = """Feature: Login
  Scenario: ok
    Given I am on the "home" page
    When I click the login button
    Then I should see the dashboard
"""


def _make_orchestrator(**kwargs) -> Orchestrator:
    return Orchestrator(SettingsStore(), **kwargs)


def test_initialize_settings_writes_missing_defaults_only() -> None:
    store = SettingsStore()
    store.update_many({"className": "Existing"})
    orchestrator = Orchestrator(store, GeneratorConfig(package_name="com.env"))

    stored = orchestrator.initialize_settings()

    assert stored == {"className": "Existing", "packageName": "com.env"}


def test_current_config_layers_defaults_store_and_overrides() -> None:
    store = SettingsStore()
    store.update_many({"className": "StoredSteps", "baseTestClass": "BaseTest"})
    orchestrator = Orchestrator(store, GeneratorConfig(package_name="com.env", imports=("a.B",)))

    config = orchestrator.current_config({"className": "RequestSteps", "baseTestClass": ""})

    assert config.package_name == "com.env"
    assert config.class_name == "RequestSteps"
    assert config.base_test_class is None
    assert config.imports == ("a.B",)


def test_update_settings_validates_framework() -> None:
    orchestrator = _make_orchestrator()

    config = orchestrator.update_settings({"framework": "junit", "imports": ["x.Y"], "unknown": 1})
    assert config.framework.value == "junit"
    assert config.imports == ("x.Y",)
    assert "unknown" not in orchestrator.settings_store.snapshot()

    with pytest.raises(ValueError):
        orchestrator.update_settings({"framework": "spock"})


def test_generate_copies_code_to_clipboard() -> None:
    orchestrator = _make_orchestrator()
    host = RequestHost(document_text=FEATURE_TEXT, document_name="login.feature")

    outcome = orchestrator.generate_step_definitions(host)

    assert outcome["status"] == "generated"
    assert outcome["selectionInfo"] == " (entire file)"
    assert outcome["result"].steps_count == 3
    assert host.clipboard == outcome["result"].code
    assert host.notifications[-1].message == (
        "Generated 3 step definition(s) (entire file) and copied to clipboard!"
    )
    assert outcome["followUp"] is None


def test_generate_uses_selection_when_present() -> None:
    orchestrator = _make_orchestrator()
    host = RequestHost(
        document_text=FEATURE_TEXT,
        selection_text="When I click the login button\nThen I should see the dashboard",
        document_name="login.feature",
    )

    outcome = orchestrator.generate_step_definitions(host)

    assert outcome["selectionInfo"] == " (2 lines selected)"
    assert outcome["result"].method_names == ["iClickTheLoginButton", "iShouldSeeTheDashboard"]


def test_generate_without_document() -> None:
    host = RequestHost()

    outcome = _make_orchestrator().generate_step_definitions(host)

    assert outcome["status"] == "no_document"
    assert host.notifications[0].level == "error"


def test_non_feature_document_requires_confirmation() -> None:
    orchestrator = _make_orchestrator()

    declined = RequestHost(document_text="just notes", document_name="notes.txt")
    assert orchestrator.generate_step_definitions(declined)["status"] == "cancelled"

    accepted = RequestHost(
        document_text="just notes",
        document_name="notes.txt",
        answers={"continueNonFeature": "Yes"},
    )
    outcome = orchestrator.generate_step_definitions(accepted)
    assert outcome["status"] == "no_steps"
    assert "No valid Cucumber steps found (entire file)" in accepted.notifications[-1].message


def test_empty_selection_only_reports_empty() -> None:
    host = RequestHost(document_text=FEATURE_TEXT, document_name="login.feature")

    outcome = _make_orchestrator().generate_step_definitions(host, selection_only=True)

    assert outcome["status"] == "empty"


def test_follow_up_view_output_shows_preview() -> None:
    host = RequestHost(
        document_text=FEATURE_TEXT, document_name="login.feature", answers={"followUp": VIEW_OUTPUT}
    )

    outcome = _make_orchestrator().generate_step_definitions(host)

    assert outcome["followUp"] == VIEW_OUTPUT
    assert host.preview == outcome["result"].code
    assert host.preview_language == "java"


def test_follow_up_create_file_writes_generated_code(tmp_path) -> None:
    host = RequestHost(
        document_text=FEATURE_TEXT,
        document_name="login.feature",
        fs_repo=FsRepository(str(tmp_path)),
        answers={"followUp": CREATE_FILE, "fileName": "src/test/LoginSteps.java"},
    )

    outcome = _make_orchestrator().generate_step_definitions(host)

    assert outcome["fileStatus"]["status"] == "created"
    written = (tmp_path / "src" / "test" / "LoginSteps.java").read_text(encoding="utf-8")
    assert written == outcome["result"].code


def test_follow_up_configure_updates_settings() -> None:
    orchestrator = _make_orchestrator()
    host = RequestHost(
        document_text=FEATURE_TEXT,
        document_name="login.feature",
        answers={"followUp": CONFIGURE, "className": "LoginSteps"},
    )

    orchestrator.generate_step_definitions(host)

    assert orchestrator.current_config().class_name == "LoginSteps"


def test_overrides_apply_only_to_one_call() -> None:
    orchestrator = _make_orchestrator()

    result = orchestrator.generate_code("Given a step", {"className": "OneOff"})

    assert "public class OneOff {" in result.code
    assert orchestrator.current_config().class_name == "StepDefinitions"


def test_create_step_file_uses_sample_steps_by_default(tmp_path) -> None:
    orchestrator = _make_orchestrator(default_step_file_name="Sample.java")
    host = RequestHost(fs_repo=FsRepository(str(tmp_path)))

    status = orchestrator.create_step_file(host)

    assert status == {"status": "created", "targetPath": "Sample.java", "message": None}
    content = (tmp_path / "Sample.java").read_text(encoding="utf-8")
    assert "public void iAmOnTheHomepage()" in content
    assert "public void iClickOnTheLoginButton()" in content
    assert "public void iShouldSeeTheLoginForm()" in content


def test_create_step_file_cancel_and_failure() -> None:
    orchestrator = _make_orchestrator()

    cancelled = orchestrator.create_step_file(RequestHost(answers={"fileName": None}), "x")
    failed_host = RequestHost()
    failed = orchestrator.create_step_file(failed_host, "x")

    assert cancelled["status"] == "cancelled"
    assert failed["status"] == "failed"
    assert failed_host.notifications[-1].message == "Failed to create file: StepDefinitions.java"


def test_configure_cancel_keeps_settings() -> None:
    orchestrator = _make_orchestrator()

    result = orchestrator.configure(RequestHost(answers={"packageName": "com.new", "className": None}))

    assert result["status"] == "cancelled"
    assert orchestrator.current_config().package_name == "com.example.stepdefinitions"


def test_configure_saves_answers() -> None:
    orchestrator = _make_orchestrator()

    result = orchestrator.configure(
        RequestHost(answers={"packageName": "com.new", "className": "NewSteps", "baseTestClass": "Base"})
    )

    assert result["status"] == "updated"
    assert result["config"]["packageName"] == "com.new"
    assert result["config"]["baseTestClass"] == "Base"


def test_quick_actions() -> None:
    orchestrator = _make_orchestrator()
    host = RequestHost()

    actions = [item["action"] for item in orchestrator.quick_actions()]
    about = orchestrator.run_quick_action("about", host)

    assert actions == ["generate", "createFile", "configure", "about"]
    assert about["status"] == "shown"
    assert "Cucumber Step Definition Generator" in host.notifications[0].message
    with pytest.raises(ValueError):
        orchestrator.run_quick_action("deploy", host)
