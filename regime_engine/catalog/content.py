# Static regime table, ordered from Extreme Fear (index 0) to Extreme Greed (index 4).
# Allocation targets sum to 100 (crypto + stable), use-case breakdowns sum to 100
# (spot + lp + stable). Only Fear and Greed carry from_left / from_right variants.

REGIME_ORDER = ["ef", "f", "n", "g", "eg"]

REGIME_TABLE = [
    {
        "id": "ef",
        "label": "Extreme Fear",
        "range": "0-25",
        "fear_greed_index": (0, 25),
        "allocation": {"crypto": 70, "stable": 30},
        "color": "text-red-500",
        "fill_color": "#ef4444",
        "author": "Warren Buffett",
        "philosophy": '"Be greedy when others are fearful"',
        "why_this_works": (
            "Historical crypto bottoms occur during extreme fear. Value-buying without "
            "leverage minimizes risk while maximizing long-term upside."
        ),
        "actions": [
            "DCA into BTC/ETH using only your stables",
            "Prioritize debt repayment if LTV rises",
            "No new leverage during this cycle",
        ],
        "strategies": {
            "default": {
                "title": "Maximum Accumulation",
                "description": "Historical crypto bottoms occur during extreme fear",
                "actions": [
                    "DCA into BTC/ETH using only your stables",
                    "Prioritize debt repayment if LTV rises",
                    "No new leverage during this cycle",
                ],
                "asset_flow": "dca-buy",
                "use_case": {
                    "scenario": "Bitcoin drops 33% from recent highs and the index sinks below 25.",
                    "user_intent": "I want to DCA into BTC/ETH without touching leverage.",
                    "action": "Aggressively accumulates BTC/ETH from stables over 5-10 days.",
                    "allocation_before": {"spot": 10, "lp": 20, "stable": 70},
                    "allocation_after": {"spot": 70, "lp": 0, "stable": 30},
                },
            },
        },
    },
    {
        "id": "f",
        "label": "Fear",
        "range": "26-45",
        "fear_greed_index": (26, 45),
        "allocation": {"crypto": 60, "stable": 40},
        "color": "text-orange-500",
        "fill_color": "#f97316",
        "author": "Nathan Rothschild",
        "philosophy": "\"Buy when there's blood in the streets\"",
        "why_this_works": (
            "Markets often retest lows. LP positions act as a midway zone: if market drops "
            "to Extreme Fear, you can unwind LP to buy spot."
        ),
        "actions": [
            "Small probe entries with light DCA",
            "Partial BTC/ETH-USD LP positions",
            "Take profits if borrowing rates spike",
        ],
        "strategies": {
            "from_left": {
                "title": "Monitor Market Recovery",
                "description": "Market recovering from extreme fear - hold steady",
                "actions": [
                    "Monitor positions without new trades",
                    "Watch for confirmation of recovery",
                    "Repay debt if borrowing rates spike",
                ],
                "asset_flow": "hold",
                "leverage_action": "Repay debt if LTV > 50%",
                "use_case": {
                    "scenario": "Bitcoin stabilizes after a capitulation week.",
                    "user_intent": "I want to hold what I accumulated at the bottom.",
                    "action": "Monitors positions, no rebalancing.",
                    "allocation_before": {"spot": 70, "lp": 0, "stable": 30},
                    "allocation_after": {"spot": 70, "lp": 0, "stable": 30},
                },
            },
            "from_right": {
                "title": "Unwind LP for Spot",
                "description": "Market declining from neutral - prepare for deeper fear",
                "actions": [
                    "Unwind 5% of LP positions into spot BTC/ETH",
                    "DCA execution over 5 days (1%/day)",
                    "Prepare for potential Extreme Fear buying opportunity",
                ],
                "asset_flow": "lp-to-spot",
                "lp_transformation": {"from": "lp", "to": "spot", "percentage": 5, "duration": "5 days"},
                "use_case": {
                    "scenario": "Bitcoin drops 8% and sentiment slides out of Neutral.",
                    "user_intent": "I want more spot exposure before a deeper selloff.",
                    "action": "Shifts part of the LP position into spot BTC/ETH.",
                    "allocation_before": {"spot": 0, "lp": 30, "stable": 70},
                    "allocation_after": {"spot": 10, "lp": 20, "stable": 70},
                },
            },
            "default": {
                "title": "Cautious Positioning",
                "description": "Markets often retest lows",
                "actions": [
                    "Small probe entries with light DCA",
                    "Partial BTC/ETH-USD LP positions",
                    "Take profits if borrowing rates spike",
                ],
                "asset_flow": "hold",
            },
        },
    },
    {
        "id": "n",
        "label": "Neutral",
        "range": "46-54",
        "fear_greed_index": (46, 54),
        "allocation": {"crypto": 50, "stable": 50},
        "color": "text-yellow-500",
        "fill_color": "#eab308",
        "author": "Jesse Livermore",
        "philosophy": '"It was always my sitting that made the big money"',
        "why_this_works": (
            "When markets lack clear direction, the best move is often no move. Preserve "
            "capital and wait for clearer signals at extremes."
        ),
        "actions": [
            "Holiday mode, minimal activity",
            "Light rebalancing only if allocation drifts",
            "Maintain current positions",
        ],
        "strategies": {
            "default": {
                "title": "Holiday Mode",
                "description": "Markets lack clear direction - preserve capital",
                "actions": [
                    "Minimal trading activity",
                    "Light rebalancing only if allocation drifts significantly",
                    "Maintain current positions and wait for clearer signals",
                ],
                "asset_flow": "monitor-leverage",
                "leverage_action": "Only deleverage if borrowing rates spike above threshold",
                "use_case": {
                    "scenario": "The index hovers between 46 and 54 for weeks.",
                    "user_intent": "I don't want to overtrade.",
                    "action": "Zero rebalancing.",
                    "allocation_before": {"spot": 50, "lp": 20, "stable": 30},
                    "allocation_after": {"spot": 50, "lp": 20, "stable": 30},
                },
            },
        },
    },
    {
        "id": "g",
        "label": "Greed",
        "range": "55-75",
        "fear_greed_index": (55, 75),
        "allocation": {"crypto": 40, "stable": 60},
        "color": "text-lime-500",
        "fill_color": "#84cc16",
        "author": "Bernard Baruch",
        "philosophy": '"Nobody ever went broke taking a profit"',
        "why_this_works": (
            "Soft profit-taking via LP positions lets you lock gains while earning fees and "
            "retaining some upside exposure."
        ),
        "actions": [
            "Gradually shift spot BTC/ETH into LP positions",
            "DCA-sell if coming from Neutral",
            "Avoid new purchases unless from higher regime",
        ],
        "strategies": {
            "from_left": {
                "title": "Lock Gains into LP",
                "description": "Market rising from neutral - take soft profits",
                "actions": [
                    "Shift 5% from spot BTC/ETH into crypto-USDC LP",
                    "DCA execution over 5 days (1%/day)",
                    "Earn trading fees while maintaining crypto exposure",
                ],
                "asset_flow": "spot-to-lp",
                "lp_transformation": {"from": "spot", "to": "lp", "percentage": 5, "duration": "5 days"},
                "use_case": {
                    "scenario": "The index climbs out of Neutral as Bitcoin rallies.",
                    "user_intent": "I want to lock gains without selling everything.",
                    "action": "Moves part of spot BTC/ETH into LP positions.",
                    "allocation_before": {"spot": 70, "lp": 0, "stable": 30},
                    "allocation_after": {"spot": 60, "lp": 10, "stable": 30},
                },
            },
            "from_right": {
                "title": "Take a Rest",
                "description": "Market correcting from extreme greed - bear market mode",
                "actions": [
                    "Holiday mode - avoid new positions",
                    "Let existing positions ride",
                    "Wait for clearer directional signals",
                ],
                "asset_flow": "hold",
                "leverage_action": "Monitor but avoid trading during correction",
                "use_case": {
                    "scenario": "Bitcoin corrects 15% from the top and greed cools off.",
                    "user_intent": "I don't want to buy back too early.",
                    "action": "Holds the de-risked allocation.",
                    "allocation_before": {"spot": 20, "lp": 10, "stable": 70},
                    "allocation_after": {"spot": 20, "lp": 10, "stable": 70},
                },
            },
            "default": {
                "title": "Soft Profit-Taking",
                "description": "Lock gains while retaining exposure",
                "actions": [
                    "Gradually shift spot BTC/ETH into LP positions",
                    "DCA-sell if coming from Neutral",
                    "Avoid new purchases unless from higher regime",
                ],
                "asset_flow": "spot-to-lp",
            },
        },
    },
    {
        "id": "eg",
        "label": "Extreme Greed",
        "range": "76-100",
        "fear_greed_index": (76, 100),
        "allocation": {"crypto": 30, "stable": 70},
        "color": "text-green-500",
        "fill_color": "#22c55e",
        "author": "Warren Buffett",
        "philosophy": '"Be fearful when others are greedy"',
        "why_this_works": (
            "Market tops coincide with extreme greed. Shifting focus from gains to downside "
            "protection preserves wealth during inevitable corrections."
        ),
        "actions": [
            "DCA-sell excess BTC/ETH into stables",
            "Retain small beta via token-USD LPs",
            "Move stables to conservative yields (perp vaults, stable pools)",
        ],
        "strategies": {
            "default": {
                "title": "Maximum Profit-Taking",
                "description": "Market tops coincide with extreme greed",
                "actions": [
                    "DCA-sell excess BTC/ETH into stables",
                    "Retain small beta via token-USD LPs",
                    "Move stables to conservative yields (perp vaults, stable pools)",
                ],
                "asset_flow": "dca-sell",
                "use_case": {
                    "scenario": "Bitcoin prints a new all-time high and the index passes 80.",
                    "user_intent": "I want to take profits before the crowd does.",
                    "action": "DCA-sells spot BTC/ETH into stables, keeps a small LP.",
                    "allocation_before": {"spot": 60, "lp": 10, "stable": 30},
                    "allocation_after": {"spot": 20, "lp": 10, "stable": 70},
                },
            },
        },
    },
]
