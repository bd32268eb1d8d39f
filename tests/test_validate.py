import pytest

from maajise.validate import (
    MAX_URL_LENGTH,
    ValidationError,
    contains_shell_metachars,
    sanitize_input,
    validate_git_url,
)


@pytest.mark.parametrize(
    "url",
    [
        "https://github.com/user/repo.git",
        "https://gitlab.com/user/repo.git",
        "https://github.com/user/repo",
        "git@example.com:user/repo.git",
        "git@example.com:user/repo",
        "ssh://git@example.com/user/repo.git",
    ],
)
def test_validate_git_url_valid(url):
    assert validate_git_url(url) is None


@pytest.mark.parametrize(
    "url",
    [
        "https://github.com/user/repo.git; echo hacked",
        "https://github.com/user/repo.git & malicious",
        "https://github.com/user/repo.git | cat /etc/passwd",
        "https://github.com/user/$REPO.git",
        "https://github.com/user/`whoami`.git",
        "https://github.com/user/repo.git\nmalicious",
        "https://github.com/user/repo.git\r\nmalicious",
        "https://github.com/user/repo.git > /tmp/file",
        "",
        "github.com/user/repo.git",
        "ftp://github.com/user/repo.git",
        "https://github.com/" + "\x00" * MAX_URL_LENGTH,
    ],
)
def test_validate_git_url_invalid(url):
    with pytest.raises(ValidationError):
        validate_git_url(url)


def test_validate_git_url_messages():
    with pytest.raises(ValidationError, match="cannot be empty"):
        validate_git_url("")
    with pytest.raises(ValidationError, match="maximum length of 2048"):
        validate_git_url("https://github.com/" + "a" * MAX_URL_LENGTH)
    with pytest.raises(ValidationError, match="shell metacharacters"):
        validate_git_url("https://github.com/user/repo.git; ls")
    with pytest.raises(ValidationError, match="invalid git URL format"):
        validate_git_url("ftp://github.com/user/repo.git")


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        validate_git_url("")


@pytest.mark.parametrize(
    "text, max_len, expected",
    [
        ("hello", 100, "hello"),
        ("  hello", 100, "hello"),
        ("hello  ", 100, "hello"),
        ("  hello world  ", 100, "hello world"),
        ("12345", 5, "12345"),
    ],
)
def test_sanitize_input_valid(text, max_len, expected):
    assert sanitize_input(text, max_len) == expected


@pytest.mark.parametrize(
    "text, max_len, message",
    [
        ("", 100, "empty"),
        ("   ", 100, "empty"),
        ("123456", 5, "maximum length of 5"),
        ("hello\nworld", 100, "multiline"),
        ("hello\t\nworld", 100, "multiline"),
    ],
)
def test_sanitize_input_invalid(text, max_len, message):
    with pytest.raises(ValidationError, match=message):
        sanitize_input(text, max_len)


@pytest.mark.parametrize(
    "s, expected",
    [
        ("hello", False),
        ("https://github.com/user/repo.git", False),
        ("my-project-123", False),
        ("my_project.tar.gz", False),
        ("test;echo", True),
        ("test&echo", True),
        ("test|echo", True),
        ("test$var", True),
        ("test`cmd`", True),
        ("test\necho", True),
        ("test\recho", True),
        ("test > output", True),
        ("test(echo)", True),
        ("test{a,b}", True),
    ],
)
def test_contains_shell_metachars(s, expected):
    assert contains_shell_metachars(s) is expected