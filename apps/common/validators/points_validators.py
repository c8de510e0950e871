"""
Points-related validators.
"""
from rest_framework import serializers

MAX_POINTS_PER_OPERATION = 100000


def validate_points_amount(value):
    """
    Validate a manual points amount.

    Args:
        value: Points amount integer

    Raises:
        serializers.ValidationError: If the amount is not positive or exceeds the per-operation cap

    Returns:
        int: Validated points amount
    """
    if value <= 0:
        raise serializers.ValidationError("Points amount must be greater than 0.")

    if value > MAX_POINTS_PER_OPERATION:
        raise serializers.ValidationError(
            f"Points amount must not exceed {MAX_POINTS_PER_OPERATION}."
        )

    return value
