import unittest
from unittest.mock import patch

from regime_engine.core.models import AllocationBreakdown, RegimeId
from regime_engine.strategy.use_cases import (
    has_allocation_change,
    lp_direction,
    strategy_tab_label,
    use_case_variants,
)


class TestAllocationHelpers(unittest.TestCase):

    def test_lp_direction(self):
        before = AllocationBreakdown(spot=70, lp=0, stable=30)
        after = AllocationBreakdown(spot=60, lp=10, stable=30)
        self.assertEqual(lp_direction(before, after), "building")
        self.assertEqual(lp_direction(after, before), "unwinding")
        self.assertIsNone(lp_direction(before, before))

    def test_has_allocation_change(self):
        before = AllocationBreakdown(spot=50, lp=20, stable=30)
        self.assertFalse(has_allocation_change(before, AllocationBreakdown(spot=50, lp=20, stable=30)))
        self.assertTrue(has_allocation_change(before, AllocationBreakdown(spot=40, lp=30, stable=30)))
        self.assertFalse(has_allocation_change(None, before))
        self.assertFalse(has_allocation_change(before, None))


class TestUseCaseVariants(unittest.TestCase):

    def test_one_tab_group_per_regime(self):
        tabs = use_case_variants()
        self.assertEqual([t.number for t in tabs], ["01", "02", "03", "04", "05"])
        self.assertEqual(tabs[0].regime, "Extreme Fear")

    def test_directional_variants_first(self):
        fear = use_case_variants()[1]
        self.assertEqual([v.direction for v in fear.variants], ["from-left", "from-right"])
        self.assertEqual(fear.variants[0].tab_label, "From Extreme Fear ↑")
        self.assertEqual(fear.variants[1].lp_direction, "unwinding")

    def test_single_strategy_regimes_use_default(self):
        neutral = use_case_variants()[2]
        self.assertEqual(len(neutral.variants), 1)
        self.assertEqual(neutral.variants[0].tab_label, "Holiday Mode")
        self.assertIsNone(neutral.variants[0].lp_direction)

    def test_missing_tab_label_raises(self):
        with patch.dict("regime_engine.strategy.use_cases.STRATEGY_TAB_LABELS", {RegimeId.NEUTRAL: {}}):
            with self.assertRaises(KeyError):
                use_case_variants()

    def test_strategy_tab_label_lookup(self):
        self.assertEqual(strategy_tab_label(RegimeId.GREED, "from-right"), "From Extreme Greed ↓")
        self.assertIsNone(strategy_tab_label(RegimeId.GREED, "default"))


if __name__ == "__main__":
    unittest.main()
