"""Scorer: weighted-sum heuristic producing one raw score per ScoreSlot.

Numerical features contribute ``value * weight`` to the slots named in their
rule; features without a dedicated rule use DEFAULT_RULE. Categorical features
add fixed bonuses for a few known codes.

Rules are resolved by feature name once per schema (``compile_rules``), so
scoring a request only walks precomputed per-index rules.
"""

from collections.abc import Sequence

from models.schemas.feature_schema import FeatureSchema
from models.schemas.prediction_result import SCORE_SLOTS, ScoreSlot, ScoreVector

# Each rule lists only the slots it touches.
Rule = tuple[tuple[ScoreSlot, float], ...]

NAMED_RULES: dict[str, Rule] = {
    "cart_abandonment": ((ScoreSlot.ADDTOCART, 1.5), (ScoreSlot.TRANSACTION, -1.2)),
    "session_transaction": ((ScoreSlot.TRANSACTION, 1.8),),
    "session_addtocart": ((ScoreSlot.ADDTOCART, 1.3),),
    "session_view": ((ScoreSlot.VIEW, 1.1),),
}

DEFAULT_RULE: Rule = (
    (ScoreSlot.ADDTOCART, 0.4),
    (ScoreSlot.TRANSACTION, 0.3),
    (ScoreSlot.VIEW, 0.3),
)

# Positions inside the categorical block
PREV_EVENT_INDEX = 0
TIME_DIFF_CATEGORY_INDEX = 3

PREV_EVENT_ADDTOCART = 0
PREV_EVENT_TRANSACTION = 1
VERY_LONG_TIME_DIFF_ABOVE = 3

PREV_ADDTOCART_BONUS = 1.0
PREV_TRANSACTION_BONUS = 1.2
LONG_GAP_VIEW_BONUS = 0.5


def compile_rules(schema: FeatureSchema) -> tuple[Rule, ...]:
    """Resolve each numerical feature to its rule, in input order."""
    return tuple(NAMED_RULES.get(name, DEFAULT_RULE) for name in schema.numerical_features)


def score(
    normalized: Sequence[float],
    schema: FeatureSchema,
    rules: tuple[Rule, ...] | None = None,
) -> ScoreVector:
    """Score a normalized vector laid out as ``schema.feature_order``.

    *rules* defaults to ``compile_rules(schema)``; callers scoring many vectors
    against the same schema should compile once and pass them in.
    """
    if rules is None:
        rules = compile_rules(schema)

    totals = {slot: 0.0 for slot in SCORE_SLOTS}
    n_num = schema.numerical_count

    for val, rule in zip(normalized[:n_num], rules):
        for slot, weight in rule:
            totals[slot] += val * weight

    # Codes are compared as float64, so 1.00000001 is not prev_event 1
    for cat_index, val in enumerate(normalized[n_num:]):
        if cat_index == PREV_EVENT_INDEX and val == PREV_EVENT_ADDTOCART:
            totals[ScoreSlot.ADDTOCART] += PREV_ADDTOCART_BONUS
        elif cat_index == PREV_EVENT_INDEX and val == PREV_EVENT_TRANSACTION:
            totals[ScoreSlot.TRANSACTION] += PREV_TRANSACTION_BONUS
        elif cat_index == TIME_DIFF_CATEGORY_INDEX and val > VERY_LONG_TIME_DIFF_ABOVE:
            totals[ScoreSlot.VIEW] += LONG_GAP_VIEW_BONUS

    return ScoreVector(**{slot.value: total for slot, total in totals.items()})
