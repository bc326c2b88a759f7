"""Risk classification of domain scores (traffic light).

The numeric buckets are the same for every domain:

    score > 66        -> alto
    33 <= score <= 66 -> medio
    score < 33        -> baixo
    score < 0         -> alto (treated as a maximal risk signal)

What a bucket means depends on the domain type. For a negativa domain a high
score is bad (red); for a positiva domain a high score is good (green). The
medium bucket is always yellow.
"""

from pydantic import BaseModel

from copsoq.models.enums import DomainType, RiskCategory, TrafficLight

HIGH_THRESHOLD = 66
MEDIUM_THRESHOLD = 33

# (domain type, category) -> traffic light
COLORS: dict[tuple[DomainType, RiskCategory], TrafficLight] = {
    (DomainType.NEGATIVE, RiskCategory.HIGH): TrafficLight.RED,
    (DomainType.NEGATIVE, RiskCategory.MEDIUM): TrafficLight.YELLOW,
    (DomainType.NEGATIVE, RiskCategory.LOW): TrafficLight.GREEN,
    (DomainType.POSITIVE, RiskCategory.HIGH): TrafficLight.GREEN,
    (DomainType.POSITIVE, RiskCategory.MEDIUM): TrafficLight.YELLOW,
    (DomainType.POSITIVE, RiskCategory.LOW): TrafficLight.RED,
}

LABELS: dict[tuple[DomainType, RiskCategory], str] = {
    (DomainType.NEGATIVE, RiskCategory.HIGH): "Atenção Necessária",
    (DomainType.NEGATIVE, RiskCategory.MEDIUM): "Monitorar",
    (DomainType.NEGATIVE, RiskCategory.LOW): "Adequado",
    (DomainType.POSITIVE, RiskCategory.HIGH): "Excelente",
    (DomainType.POSITIVE, RiskCategory.MEDIUM): "Adequado",
    (DomainType.POSITIVE, RiskCategory.LOW): "Precisa Melhorar",
}


class Classification(BaseModel):
    """Category, color and display label of one score."""

    category: RiskCategory
    color: TrafficLight
    color_hex: str
    label: str


def categorize(score: float, domain_type: DomainType) -> RiskCategory:
    """Bucket a score into baixo/medio/alto.

    Examples:
        >>> categorize(80, DomainType.NEGATIVE)
        <RiskCategory.HIGH: 'alto'>
        >>> categorize(80, DomainType.POSITIVE)
        <RiskCategory.HIGH: 'alto'>
        >>> categorize(-10, DomainType.POSITIVE)
        <RiskCategory.HIGH: 'alto'>
    """
    if score < 0 or score > HIGH_THRESHOLD:
        return RiskCategory.HIGH
    if score >= MEDIUM_THRESHOLD:
        return RiskCategory.MEDIUM
    return RiskCategory.LOW


def _bucket(category: RiskCategory) -> RiskCategory:
    # Unanswered domains are displayed like the low bucket
    return RiskCategory.LOW if category == RiskCategory.NOT_ANSWERED else category


def color(category: RiskCategory, domain_type: DomainType) -> TrafficLight:
    """Traffic light for a category, inverted for positiva domains."""
    return COLORS[(DomainType(domain_type), _bucket(RiskCategory(category)))]


def label(category: RiskCategory, domain_type: DomainType) -> str:
    """Display text for a category, worded per domain type."""
    return LABELS[(DomainType(domain_type), _bucket(RiskCategory(category)))]


def classify(score: float, domain_type: DomainType) -> Classification:
    """Categorize a score and resolve its color and label."""
    category = categorize(score, domain_type)
    light = color(category, domain_type)
    return Classification(
        category=category,
        color=light,
        color_hex=light.hex,
        label=label(category, domain_type),
    )
