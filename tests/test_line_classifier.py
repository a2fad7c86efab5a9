from __future__ import annotations

from tools.line_classifier import (
    classify_lines,
    looks_like_feature_document,
    split_lines,
)


FEATURE_TEXT = """
# language: en
Feature: Login

  Background:
    Given the application is running

  Scenario: Successful login
    Given I am on the "home" page
    When I click the login button
    And I enter "admin" as username
    But I do not check remember me
    Then I should see the dashboard
    Given I am on the "home" page

  Examples:
    | user  |
    | admin |
"""


def test_keeps_only_step_lines_in_order() -> None:
    steps = classify_lines(split_lines(FEATURE_TEXT))

    assert steps == [
        "Given the application is running",
        'Given I am on the "home" page',
        "When I click the login button",
        'Given I enter "admin" as username',
        "Given I do not check remember me",
        "Then I should see the dashboard",
    ]


def test_and_but_are_rewritten_to_given() -> None:
    steps = classify_lines(["And I click submit", "But I see error"])

    assert steps == ["Given I click submit", "Given I see error"]


def test_duplicates_are_removed_after_normalization() -> None:
    steps = classify_lines(["Given I log in", "And I log in", "Given I log in"])

    assert steps == ["Given I log in"]


def test_rejects_headers_comments_tables_and_keywords_without_body() -> None:
    lines = [
        "",
        "# Given commented out",
        "Feature: Given something",
        "Scenario: When something",
        "| Given | table |",
        "Given",
        "Givenx something",
        "given lowercase keyword",
        "Examples:",
    ]

    assert classify_lines(lines) == []


def test_classification_is_idempotent() -> None:
    first = classify_lines(split_lines(FEATURE_TEXT))

    assert classify_lines(first) == first


def test_empty_input_gives_empty_result() -> None:
    assert classify_lines([]) == []
    assert classify_lines(split_lines("")) == []


def test_split_lines_trims_and_handles_crlf() -> None:
    assert split_lines("  Given a\r\n\tWhen b  \rThen c") == ["Given a", "When b", "Then c"]


def test_feature_document_detection() -> None:
    assert looks_like_feature_document("features/Login.FEATURE", "")
    assert looks_like_feature_document(None, "  Scenario: x\n")
    assert looks_like_feature_document("notes.txt", "When something happens")
    assert not looks_like_feature_document("notes.txt", "just some text")
