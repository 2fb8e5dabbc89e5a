from .wordlist import DICE_SIDES


def remap(value: int, dice_count: int) -> int:
    """
    Map a value in [0, 6^dice_count) to a dice key.

    Each base 6 digit of value becomes one decimal digit of the key, shifted to 1-6.
    The least significant base 6 digit ends up in the units position.
    """
    if dice_count < 1:
        raise ValueError(f"dice_count must be positive, got {dice_count}")
    if not 0 <= value < DICE_SIDES**dice_count:
        raise ValueError(f"value {value} out of range for {dice_count} dice")

    result = 0
    for position in range(dice_count):
        result += (value % DICE_SIDES + 1) * 10**position
        value //= DICE_SIDES
    return result


def rolls_to_index(rolls: str) -> int:
    if not rolls or any(roll not in "123456" for roll in rolls):
        raise ValueError(f"{rolls!r} is not a sequence of dice rolls")
    return int(rolls)
