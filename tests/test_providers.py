import pytest

from rokit.providers import ArtifactProvider


@pytest.mark.parametrize("text", ["github", "GitHub", "  GITHUB  ", "gitHub\n"])
def test_parse_github(text):
    assert ArtifactProvider.parse(text) is ArtifactProvider.GITHUB


def test_round_trip_through_str():
    for provider in ArtifactProvider:
        assert ArtifactProvider.parse(provider.as_str()) is provider
        assert ArtifactProvider.parse(str(provider)) is provider


def test_display_name_round_trip():
    for provider in ArtifactProvider:
        assert ArtifactProvider.parse(provider.display_name()) is provider


def test_names():
    assert ArtifactProvider.GITHUB.as_str() == "github"
    assert ArtifactProvider.GITHUB.display_name() == "GitHub"


def test_default_is_github():
    assert ArtifactProvider.default() is ArtifactProvider.GITHUB


def test_parse_unknown():
    with pytest.raises(ValueError, match="unknown artifact provider 'gitlab'"):
        ArtifactProvider.parse(" GitLab ")