import threading
import pytest
from lesscolor import hl_groups
from lesscolor.attribute_resolver import (
    AttributeResolver,
    ConfigurationError,
    LessHighlightingConfiguration,
)
from lesscolor.tokens import Category


class TestAttributeResolver:
    """Tests for the AttributeResolver class"""

    @pytest.fixture
    def resolver(self):
        resolver = AttributeResolver()
        resolver.configure(LessHighlightingConfiguration())
        return resolver

    def test_unconfigured(self):
        resolver = AttributeResolver()
        assert not resolver.configured
        with pytest.raises(ConfigurationError):
            resolver.resolve(Category.DEFAULT)
        with pytest.raises(ConfigurationError):
            resolver.bindings

    # fmt: off
    @pytest.mark.parametrize(
        "category, expected",
        [
            pytest.param(Category.DEFAULT,             hl_groups.DEFAULT,             id="default"),
            pytest.param(Category.STRING,              hl_groups.STRING,              id="string"),
            pytest.param(Category.COMMENT,             hl_groups.COMMENT,             id="comment"),
            pytest.param(Category.AT_KEYWORD,          hl_groups.AT_KEYWORD,          id="at_keyword"),
            pytest.param(Category.MEDIA_QUERY_KEYWORD, hl_groups.MEDIA_QUERY_KEYWORD, id="media_query_keyword"),
        ],
    )
    # fmt: on
    def test_resolve(self, resolver, category, expected):
        assert resolver.resolve(category) == expected
        assert resolver.resolve(category) == expected

    def test_every_category_bound(self, resolver):
        assert resolver.configured
        assert set(resolver.bindings) == set(Category)

    def test_bindings_read_only(self, resolver):
        with pytest.raises(TypeError):
            resolver.bindings[Category.DEFAULT] = "other"

    def test_configure_twice(self, resolver):
        with pytest.raises(ConfigurationError):
            resolver.configure(LessHighlightingConfiguration(DEFAULT="other"))
        assert resolver.resolve(Category.DEFAULT) == hl_groups.DEFAULT

    def test_custom_attributes(self):
        resolver = AttributeResolver()
        resolver.configure(LessHighlightingConfiguration(STRING="my.string"))
        assert resolver.resolve(Category.STRING) == "my.string"

    # fmt: off
    @pytest.mark.parametrize(
        "overrides",
        [
            pytest.param({"DEFAULT": ""},              id="default_empty"),
            pytest.param({"DEFAULT": None},            id="default_none"),
            pytest.param({"AT_KEYWORD": ""},           id="at_keyword_empty"),
            pytest.param({"COMMENT": None, "STRING": None}, id="several_missing"),
        ],
    )
    # fmt: on
    def test_missing_binding(self, overrides):
        resolver = AttributeResolver()
        with pytest.raises(ConfigurationError):
            resolver.configure(LessHighlightingConfiguration(**overrides))
        assert not resolver.configured
        # A failed configure can be retried
        resolver.configure(LessHighlightingConfiguration())
        assert resolver.configured

    def test_unknown_category(self, resolver):
        with pytest.raises(ConfigurationError):
            resolver.resolve("not a category")

    def test_concurrent_configure(self):
        resolver = AttributeResolver()
        errors = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            try:
                resolver.configure(LessHighlightingConfiguration())
            except ConfigurationError as err:
                errors.append(err)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(errors) == 7
        assert resolver.resolve(Category.DEFAULT) == hl_groups.DEFAULT
