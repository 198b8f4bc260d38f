from wordperms.core.errors import InputLoadError, OptionError, OutputWriteError, WordpermsError


def test_error_str_includes_location():
    e = InputLoadError(code="E_INPUT_READ", message="boom", file="words.txt", path="input")
    assert str(e) == "words.txt:input: E_INPUT_READ: boom"


def test_error_str_without_location():
    assert str(OptionError(code="E_X", message="bad")) == "wordperms: E_X: bad"


def test_exit_codes_per_error_kind():
    assert InputLoadError(code="E", message="m").exit_code == 1
    assert OutputWriteError(code="E", message="m").exit_code == 1
    assert OptionError(code="E", message="m").exit_code == 2
    assert isinstance(OptionError(code="E", message="m"), WordpermsError)
