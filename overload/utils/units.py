KG_TO_LB = 2.2046226218


def kg_to_lb(kg: float | None) -> float:
    if kg is None:
        return 0.0
    return kg * KG_TO_LB


def format_weight(kg: float) -> str:
    return f"{kg:.1f} kg / {kg_to_lb(kg):.1f} lb"


def format_duration(total_seconds: int) -> str:
    minutes, seconds = divmod(int(total_seconds), 60)
    return f"{minutes}:{seconds:02d}"
