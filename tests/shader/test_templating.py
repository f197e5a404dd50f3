from pytest import raises, fixture

from builtinshader import register_kage_loader, load_kage
from builtinshader.shader.templating import root_loader


@fixture
def contexts():
    """Names of loader contexts that a test registers; removed afterwards."""
    names = []
    yield names
    for name in names:
        root_loader.mapping.pop(name, None)
    load_kage.cache_clear()


def test_load_builtin_snippets():
    code = load_kage("samples_unsafe.kage")
    assert code.count("imageSrc0UnsafeAt(") == 4
    assert code.endswith("\n")

    # Includes are resolved, without adding blank lines
    code = load_kage("linear_unsafe.kage")
    assert "include" not in code
    assert code == "\n" + load_kage("samples_unsafe.kage")


def test_register_kage_loader_dict(contexts):
    contexts.append("test_dict")
    register_kage_loader(
        "test_dict",
        {
            "a.kage": "\tx := 1\n",
            "b.kage": "{$ include 'test_dict.a.kage' $}\n\ty := x\n",
        },
    )
    assert load_kage("b.kage", "test_dict") == "\tx := 1\n\ty := x\n"


def test_include_across_contexts(contexts):
    contexts.append("test_cross")
    register_kage_loader(
        "test_cross",
        {"clear.kage": "{$ include 'builtinshader.clear.kage' $}"},
    )
    code = load_kage("clear.kage", "test_cross")
    assert code == load_kage("clear.kage")
    assert "return vec4(0)" in code


def test_register_kage_loader_function(contexts):
    def loader(name):
        return f"// {name}\n"

    contexts.append("test_func")
    register_kage_loader("test_func", loader)
    assert load_kage("foo.kage", "test_func") == "// foo.kage\n"


def test_register_kage_loader_errors(contexts):
    with raises(TypeError):
        register_kage_loader("has.dot", {})
    with raises(TypeError):
        register_kage_loader(42, {})
    with raises(TypeError):
        register_kage_loader("test_bad", 42)
    assert "test_bad" not in root_loader.mapping

    contexts.append("test_twice")
    register_kage_loader("test_twice", {})
    with raises(RuntimeError):
        register_kage_loader("test_twice", {})
    with raises(RuntimeError):
        register_kage_loader("builtinshader", {})


def test_registration_can_be_repeated_after_removal(contexts):
    # The fixture removes contexts, so the same test data can be registered again
    for _ in range(2):
        register_kage_loader("test_again", {"a.kage": "x := 1\n"})
        assert load_kage("a.kage", "test_again") == "x := 1\n"
        root_loader.mapping.pop("test_again")
        load_kage.cache_clear()


def test_missing_variable_in_snippet(contexts):
    contexts.append("test_missing")
    register_kage_loader("test_missing", {"a.kage": "x := {{ value }}\n"})
    with raises(ValueError):
        load_kage("a.kage", "test_missing")
