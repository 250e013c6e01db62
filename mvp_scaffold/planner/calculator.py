"""Configuration deriver for the calculator archetype.

The main pain is matched against four keyword families (cost, ROI,
conversion, generic fallback); each family maps to a fixed input schema,
result schema and formula description.
"""

from __future__ import annotations

from mvp_scaffold.models import (
    AnalysisContext,
    CalculatorConfig,
    CalculatorField,
    CalculatorKind,
    ResultField,
)

KIND_MARKERS: tuple[tuple[CalculatorKind, tuple[str, ...]], ...] = (
    (CalculatorKind.COST, ("стоимост", "cost", "цен", "price", "бюджет", "budget")),
    (CalculatorKind.ROI, ("roi", "окупаемост", "return", "investment")),
    (CalculatorKind.CONVERSION, ("конверс", "conversion")),
)

_SCHEMAS: dict[CalculatorKind, tuple[list[CalculatorField], list[ResultField], str]] = {
    CalculatorKind.COST: (
        [
            CalculatorField(name="users", label="Количество пользователей", type="number",
                            placeholder="100", min=1, default_value=100),
            CalculatorField(name="period", label="Период", type="select",
                            options=["Месяц", "Квартал", "Год"], default_value="Месяц"),
            CalculatorField(name="plan", label="Тарифный план", type="select",
                            options=["Basic", "Pro", "Enterprise"], default_value="Pro"),
            CalculatorField(name="support", label="Поддержка 24/7", type="select",
                            options=["Нет", "Да"], default_value="Нет"),
        ],
        [
            ResultField(name="monthlyCost", label="Ежемесячная стоимость", format="currency"),
            ResultField(name="annualCost", label="Годовая стоимость", format="currency"),
            ResultField(name="savings", label="Экономия при годовой оплате", format="currency"),
            ResultField(name="perUser", label="Стоимость на пользователя", format="currency"),
        ],
        "Расчёт на основе количества пользователей, плана и периода",
    ),
    CalculatorKind.ROI: (
        [
            CalculatorField(name="investment", label="Начальные инвестиции ($)", type="number",
                            placeholder="10000", min=0, default_value=10000),
            CalculatorField(name="monthlyRevenue", label="Ожидаемый месячный доход ($)",
                            type="number", placeholder="2000", min=0, default_value=2000),
            CalculatorField(name="monthlyExpenses", label="Ежемесячные расходы ($)",
                            type="number", placeholder="500", min=0, default_value=500),
            CalculatorField(name="period", label="Период расчёта (месяцев)", type="range",
                            min=3, max=36, default_value=12),
        ],
        [
            ResultField(name="totalProfit", label="Общая прибыль", format="currency"),
            ResultField(name="roi", label="ROI", format="percent"),
            ResultField(name="paybackMonths", label="Срок окупаемости", format="number"),
            ResultField(name="monthlyProfit", label="Чистая прибыль в месяц", format="currency"),
        ],
        "ROI = (Доход - Расходы - Инвестиции) / Инвестиции × 100%",
    ),
    CalculatorKind.CONVERSION: (
        [
            CalculatorField(name="visitors", label="Посетителей в месяц", type="number",
                            placeholder="10000", min=1, default_value=10000),
            CalculatorField(name="currentConversion", label="Текущая конверсия (%)",
                            type="number", placeholder="2", min=0, default_value=2),
            CalculatorField(name="targetConversion", label="Целевая конверсия (%)",
                            type="number", placeholder="4", min=0, default_value=4),
            CalculatorField(name="averageOrder", label="Средний чек ($)", type="number",
                            placeholder="50", min=0, default_value=50),
        ],
        [
            ResultField(name="currentRevenue", label="Текущий доход", format="currency"),
            ResultField(name="potentialRevenue", label="Потенциальный доход", format="currency"),
            ResultField(name="additionalRevenue", label="Дополнительный доход", format="currency"),
            ResultField(name="additionalCustomers", label="Доп. клиентов в месяц", format="number"),
        ],
        "Дополнительный доход = Посетители × (Целевая - Текущая конверсия) × Средний чек",
    ),
    CalculatorKind.GENERIC: (
        [
            CalculatorField(name="value1", label="Параметр 1", type="number",
                            placeholder="100", default_value=100),
            CalculatorField(name="value2", label="Параметр 2", type="number",
                            placeholder="50", default_value=50),
            CalculatorField(name="multiplier", label="Множитель", type="range",
                            min=1, max=10, default_value=2),
            CalculatorField(name="category", label="Категория", type="select",
                            options=["A", "B", "C"], default_value="A"),
        ],
        [
            ResultField(name="result", label="Результат", format="number"),
            ResultField(name="percentage", label="Процент", format="percent"),
            ResultField(name="total", label="Итого", format="currency"),
        ],
        "Расчёт на основе введённых параметров",
    ),
}


def detect_calculator_kind(main_pain: str) -> CalculatorKind:
    """Return the first keyword family whose marker occurs in *main_pain*."""
    pain = main_pain.lower()
    for kind, markers in KIND_MARKERS:
        if any(marker in pain for marker in markers):
            return kind
    return CalculatorKind.GENERIC


def derive_calculator_config(context: AnalysisContext) -> CalculatorConfig:
    """Build a ``CalculatorConfig`` from *context*."""
    main_pain = context.main_pain
    kind = detect_calculator_kind(main_pain)
    fields, result_fields, formula = _SCHEMAS[kind]

    return CalculatorConfig(
        calculator_name=context.company_name or f"{context.trend.title} Calculator",
        calculator_description=context.tagline or f"Калькулятор для {main_pain}",
        kind=kind,
        fields=list(fields),
        result_fields=list(result_fields),
        formula=formula,
    )
