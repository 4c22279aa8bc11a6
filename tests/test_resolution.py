"""
Tests for preference resolution layer.
"""
from unittest.mock import Mock

import pytest
from preference_resolver.choices import DisplayMode, ShirtColor, TimeOfDay
from preference_resolver.exceptions import EmptyCollectionError
from preference_resolver.resolution import (
    ContextDerivedStrategy,
    MostFrequentStrategy,
    MostRecentStrategy,
    PreferenceResolver,
    ResolutionResult,
    StrategyKind,
    create_resolver,
    resolve_preference,
)


class TestResolvePreference:
    """Tests for the higher-order resolve_preference helper."""

    def test_explicit_value_skips_fallback(self):
        """Test that the fallback thunk is not called when a value is given."""
        fallback = Mock(return_value=ShirtColor.BLUE)

        assert resolve_preference(ShirtColor.RED, fallback) == ShirtColor.RED
        fallback.assert_not_called()

    def test_missing_value_uses_fallback(self):
        """Test that the fallback thunk is called once when no value is given."""
        fallback = Mock(return_value=ShirtColor.BLUE)

        assert resolve_preference(None, fallback) == ShirtColor.BLUE
        fallback.assert_called_once_with()


class TestMostFrequentStrategy:
    """Tests for MostFrequentStrategy."""

    def test_blue_majority(self):
        """Test red=1, blue=2 picks BLUE."""
        strategy = MostFrequentStrategy([ShirtColor.RED, ShirtColor.BLUE, ShirtColor.BLUE])

        assert strategy.compute_default() == ShirtColor.BLUE

    def test_red_majority(self):
        """Test red=2, blue=1 picks RED."""
        strategy = MostFrequentStrategy([ShirtColor.RED, ShirtColor.BLUE, ShirtColor.RED])

        assert strategy.compute_default() == ShirtColor.RED

    def test_tie_goes_to_second_declared_variant(self):
        """Test that equal counts fall back to BLUE, the second-declared color."""
        strategy = MostFrequentStrategy([ShirtColor.RED, ShirtColor.BLUE])

        assert strategy.compute_default() == ShirtColor.BLUE
        assert strategy.tie_default == ShirtColor.BLUE

    def test_empty_collection_returns_tie_default(self):
        """Test that an empty collection is a tie, not an error."""
        strategy = MostFrequentStrategy([], variants=ShirtColor)

        assert strategy.compute_default() == ShirtColor.BLUE

    def test_custom_tie_default(self):
        """Test that tie_default overrides the second-declared rule."""
        strategy = MostFrequentStrategy([], tie_default=ShirtColor.RED)

        assert strategy.compute_default() == ShirtColor.RED

    def test_empty_collection_without_variants_rejected(self):
        """Test that the enum cannot be inferred from nothing."""
        with pytest.raises(ValueError, match="variants or tie_default"):
            MostFrequentStrategy([])

    def test_does_not_mutate_collection(self):
        """Test that the caller's list is left untouched."""
        shirts = [ShirtColor.RED, ShirtColor.BLUE, ShirtColor.BLUE]
        MostFrequentStrategy(shirts).compute_default()

        assert shirts == [ShirtColor.RED, ShirtColor.BLUE, ShirtColor.BLUE]


class TestMostRecentStrategy:
    """Tests for MostRecentStrategy."""

    def test_returns_last_element(self):
        """Test [RED, BLUE, BLUE] picks the last BLUE."""
        strategy = MostRecentStrategy([ShirtColor.RED, ShirtColor.BLUE, ShirtColor.BLUE])

        assert strategy.compute_default() == ShirtColor.BLUE

    def test_last_element_not_majority(self):
        """Test that recency ignores counts."""
        strategy = MostRecentStrategy([ShirtColor.BLUE, ShirtColor.BLUE, ShirtColor.RED])

        assert strategy.compute_default() == ShirtColor.RED

    def test_empty_collection_raises(self):
        """Test that an empty collection raises EmptyCollectionError."""
        strategy = MostRecentStrategy([])

        with pytest.raises(EmptyCollectionError, match="empty collection"):
            strategy.compute_default()


class TestContextDerivedStrategy:
    """Tests for ContextDerivedStrategy."""

    MAPPING = {TimeOfDay.DAY: DisplayMode.LIGHT, TimeOfDay.NIGHT: DisplayMode.DARK}

    def test_maps_signal(self):
        """Test that the signal is mapped through the table."""
        strategy = ContextDerivedStrategy(lambda: TimeOfDay.NIGHT, self.MAPPING)

        assert strategy.compute_default() == DisplayMode.DARK

    def test_partial_mapping_rejected(self):
        """Test that a mapping missing a signal is rejected at construction."""
        with pytest.raises(ValueError, match="missing: NIGHT"):
            ContextDerivedStrategy(lambda: TimeOfDay.DAY, {TimeOfDay.DAY: DisplayMode.LIGHT})

    def test_empty_mapping_rejected(self):
        """Test that an empty mapping is rejected."""
        with pytest.raises(ValueError):
            ContextDerivedStrategy(lambda: TimeOfDay.DAY, {})

    def test_non_enum_keys_rejected(self):
        """Test that string signal keys are rejected at construction."""
        with pytest.raises(ValueError, match="must be enum members"):
            ContextDerivedStrategy(
                lambda: "day",
                {"day": DisplayMode.LIGHT, "night": DisplayMode.DARK},
            )


class TestPreferenceResolver:
    """Tests for PreferenceResolver."""

    def test_explicit_preference_always_wins(self):
        """Test that any explicit color is returned unchanged."""
        resolver = PreferenceResolver(MostFrequentStrategy([ShirtColor.BLUE] * 5))

        for color in ShirtColor:
            assert resolver.resolve(color) == color

    def test_explicit_preference_not_validated(self):
        """Test that a preference outside the collection is still honored."""
        resolver = PreferenceResolver(MostRecentStrategy([ShirtColor.BLUE]))

        assert resolver.resolve(ShirtColor.RED) == ShirtColor.RED

    def test_explicit_preference_skips_empty_recent(self):
        """Test that an empty collection is not an error when a preference is given."""
        resolver = PreferenceResolver(MostRecentStrategy([]))

        assert resolver.resolve(ShirtColor.RED) == ShirtColor.RED

    def test_metadata_for_explicit(self):
        """Test metadata when the preference is used."""
        resolver = PreferenceResolver(MostRecentStrategy([ShirtColor.BLUE]))

        result = resolver.resolve_with_metadata(ShirtColor.RED)

        assert result == ResolutionResult(value=ShirtColor.RED, strategy_used="explicit", explicit=True)

    def test_metadata_for_fallback(self):
        """Test metadata when the fallback is used."""
        resolver = PreferenceResolver(MostRecentStrategy([ShirtColor.BLUE]))

        result = resolver.resolve_with_metadata()

        assert result.value == ShirtColor.BLUE
        assert result.strategy_used == "most_recent"
        assert result.explicit is False

    def test_idempotent(self):
        """Test that repeated calls give identical results."""
        resolver = PreferenceResolver(MostFrequentStrategy([ShirtColor.RED, ShirtColor.BLUE]))

        assert resolver.resolve() == resolver.resolve() == ShirtColor.BLUE

    def test_no_caching(self):
        """Test that each call consults the context again."""
        provider = Mock(side_effect=[TimeOfDay.DAY, TimeOfDay.NIGHT])
        resolver = PreferenceResolver(
            ContextDerivedStrategy(provider, TestContextDerivedStrategy.MAPPING)
        )

        assert resolver.resolve() == DisplayMode.LIGHT
        assert resolver.resolve() == DisplayMode.DARK
        assert provider.call_count == 2

    def test_requires_strategy(self):
        """Test that a resolver cannot be built without a strategy."""
        with pytest.raises(ValueError):
            PreferenceResolver(None)


class TestCreateResolver:
    """Tests for create_resolver factory."""

    def test_most_frequent(self):
        """Test factory builds a most-frequent resolver."""
        resolver = create_resolver(
            StrategyKind.MOST_FREQUENT,
            collection=[ShirtColor.RED, ShirtColor.RED, ShirtColor.BLUE],
        )

        assert isinstance(resolver.strategy, MostFrequentStrategy)
        assert resolver.resolve() == ShirtColor.RED

    def test_most_recent(self):
        """Test factory builds a most-recent resolver."""
        resolver = create_resolver(StrategyKind.MOST_RECENT, collection=[ShirtColor.RED])

        assert isinstance(resolver.strategy, MostRecentStrategy)
        assert resolver.resolve() == ShirtColor.RED

    def test_context_derived(self):
        """Test factory builds a context-derived resolver."""
        resolver = create_resolver(
            StrategyKind.CONTEXT_DERIVED,
            context_provider=lambda: TimeOfDay.DAY,
            mapping=TestContextDerivedStrategy.MAPPING,
        )

        assert resolver.resolve() == DisplayMode.LIGHT

    @pytest.mark.parametrize("kind", [StrategyKind.MOST_FREQUENT, StrategyKind.MOST_RECENT])
    def test_collection_required(self, kind):
        """Test that collection strategies require a collection."""
        with pytest.raises(ValueError, match="collection is required"):
            create_resolver(kind)

    def test_context_inputs_required(self):
        """Test that the context strategy requires a provider and mapping."""
        with pytest.raises(ValueError, match="context_provider and mapping"):
            create_resolver(StrategyKind.CONTEXT_DERIVED, context_provider=lambda: TimeOfDay.DAY)
