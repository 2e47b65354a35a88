import pytest

from jadio.autoprompt import AutoPromptEngine, PromptCategory, PromptError, PromptTemplate


def test_default_templates_present():
    engine = AutoPromptEngine()
    names = {t.name for t in engine.list_templates()}
    assert names == {
        "generate_function",
        "fix_bug",
        "refactor_code",
        "add_documentation",
        "write_tests",
        "optimize_performance",
        "security_review",
    }
    assert engine.get_template("missing") is None


def test_list_by_category():
    engine = AutoPromptEngine()
    security = engine.list_templates(PromptCategory.SECURITY)
    assert [t.name for t in security] == ["security_review"]
    assert engine.list_templates(PromptCategory.CUSTOM) == []


def test_generate_fix_bug():
    engine = AutoPromptEngine()
    prompt = engine.generate_prompt(
        "fix_bug", {"language": "python", "code": "x = 1", "error": "boom"}
    )
    assert prompt == (
        "Fix the following bug in this python code:\nx = 1\nError: boom\n"
        "Provide the corrected code and explain the fix."
    )
    assert engine.recent_prompts == [prompt]


def test_missing_variable():
    engine = AutoPromptEngine()
    with pytest.raises(PromptError, match="Missing variable: error"):
        engine.generate_prompt("fix_bug", {"language": "c", "code": "int x;"})
    assert engine.recent_prompts == []


def test_unknown_template():
    engine = AutoPromptEngine()
    with pytest.raises(PromptError, match="Template 'nope' not found"):
        engine.generate_prompt("nope", {})


def test_recent_prompts_capped_at_fifty():
    engine = AutoPromptEngine()
    engine.add_custom_template(PromptTemplate("echo", "echo", "{text}", ["text"]))
    for i in range(55):
        engine.generate_prompt("echo", {"text": str(i)})
    recent = engine.recent_prompts
    assert len(recent) == 50
    assert recent[0] == "5"
    assert recent[-1] == "54"


def test_custom_template_found_and_builtin_wins():
    engine = AutoPromptEngine()
    custom = PromptTemplate("mine", "d", "Hello {who}", ["who"], PromptCategory.CUSTOM)
    engine.add_custom_template(custom)
    assert engine.get_template("mine") is custom
    assert engine.list_templates(PromptCategory.CUSTOM) == [custom]
    assert engine.generate_prompt("mine", {"who": "there"}) == "Hello there"

    shadow = PromptTemplate("fix_bug", "d", "x", [], PromptCategory.CUSTOM)
    engine.add_custom_template(shadow)
    assert engine.get_template("fix_bug").category is PromptCategory.BUG_FIX


def test_extra_variables_are_ignored():
    engine = AutoPromptEngine()
    prompt = engine.generate_prompt("security_review", {"language": "go", "code": "c", "other": "z"})
    assert "z" not in prompt
    assert "{" not in prompt


def test_suggest_prompt():
    engine = AutoPromptEngine()
    assert engine.suggest_prompt("anything") == [
        "Explain this code",
        "Find potential bugs",
        "Suggest improvements",
        "Add documentation",
    ]