"""
Display labels for the calculator output in English and Chinese.

Labels are keyed by language, then by label key. Keys missing from a
translation fall back to English.
"""

from lhc_calculator.domain.enums import Language


LABELS: dict[Language, dict[str, str]] = {
    Language.ENGLISH: {
        "title": "Hospital Insurance Calculator",
        "results": "Results",
        "net_cost": "Net Additional Cost ({years} delay)",
        "loading_cost": "Future loading increase",
        "mls_cost": "Medicare Levy Surcharge paid",
        "saved_premium": "Premium saved",
        "current_loading": "Current LHC loading",
        "mls_rate": "MLS rate",
        "mls_tier": "Tier {index}: {start} - {end}",
        "mls_tier_top": "Tier {index}: above {start}",
        "break_even_income": "Break-even income",
        "break_even_never": "No break-even income (no MLS applies)",
        "outcome.saves": "Delaying {years} saves {amount}",
        "outcome.costs": "Delaying {years} costs {amount} more",
        "outcome.break-even": "Break-even: Both options cost the same",
        "recommendation.can-wait": "You can wait",
        "recommendation.consider": "Consider buying now",
        "recommendation.buy-now": "Buy now",
        "age_warning.buy-before-30": "Buy before 30 to avoid LHC loading",
        "age_warning.health-consideration": "Consider your health needs as you get older",
        "age_warning.health-risk": "Health risks increase with age",
        "risk_factors": "Risk factors",
        "risk.mls_cost": "MLS paid over {years}: {amount}",
        "risk.loading_increase": "LHC loading increase from the delay: {percent}",
        "risk.waiting_period": (
            "Waiting period: new cover has waiting periods before you can claim "
            "(up to 12 months for pre-existing conditions)"
        ),
        "medical_disclaimer": (
            "Medical costs are not included: out-of-pocket treatment costs, "
            "such as surgery gaps of $2,000 or more, come on top"
        ),
        "comparison": "Delay comparison",
        "delay_years": "Delay years",
        "cost": "Net cost",
        "best_option": "best option",
        "saving_suffix": "(save)",
        "mls_tiers": "MLS tiers ({year})",
        "validation_failed": "Invalid input:",
        "error": "Error:",
        "year_one": "{n} year",
        "year_many": "{n} years",
    },
    Language.CHINESE: {
        "title": "医院保险计算器",
        "results": "计算结果",
        "net_cost": "净额外成本（推迟{years}）",
        "loading_cost": "未来附加费增加",
        "mls_cost": "已缴医疗保险附加税",
        "saved_premium": "节省的保费",
        "current_loading": "当前终身健康保险附加费",
        "mls_rate": "医疗保险附加税税率",
        "mls_tier": "第{index}级：{start} - {end}",
        "mls_tier_top": "第{index}级：高于 {start}",
        "break_even_income": "盈亏平衡收入",
        "break_even_never": "无盈亏平衡收入（不适用附加税）",
        "outcome.saves": "推迟{years}可节省 {amount}",
        "outcome.costs": "推迟{years}将多花 {amount}",
        "outcome.break-even": "盈亏平衡：两种选择成本相同",
        "recommendation.can-wait": "可以等待",
        "recommendation.consider": "建议考虑现在购买",
        "recommendation.buy-now": "立即购买",
        "age_warning.buy-before-30": "在30岁前购买可避免附加费",
        "age_warning.health-consideration": "随着年龄增长请考虑健康需求",
        "age_warning.health-risk": "健康风险随年龄增加",
        "risk_factors": "风险因素",
        "risk.mls_cost": "推迟{years}缴纳的医疗保险附加税：{amount}",
        "risk.loading_increase": "推迟导致的附加费增加：{percent}",
        "risk.waiting_period": "等待期：新保险在可以理赔前有等待期（既往病症最长12个月）",
        "medical_disclaimer": "未包含医疗费用：治疗的自付费用（如手术差额可达 $2,000 或更多）需另行承担",
        "comparison": "推迟方案比较",
        "delay_years": "推迟年数",
        "cost": "净成本",
        "best_option": "最佳选择",
        "saving_suffix": "（节省）",
        "mls_tiers": "医疗保险附加税等级（{year}）",
        "validation_failed": "输入无效：",
        "error": "错误：",
        "year_one": "{n}年",
        "year_many": "{n}年",
    },
}


def get_label(key: str, language: Language = Language.ENGLISH, **kwargs: object) -> str:
    """
    Look up a label and fill in its placeholders.

    Raises:
        KeyError: If the key is unknown in English as well
    """
    labels = LABELS.get(language, LABELS[Language.ENGLISH])
    template = labels.get(key)
    if template is None:
        template = LABELS[Language.ENGLISH][key]
    return template.format(**kwargs) if kwargs else template


def format_years(years: float, language: Language = Language.ENGLISH) -> str:
    """Format a delay horizon, e.g. "1 year" or "5 years"."""
    if years == int(years):
        years = int(years)
    key = "year_one" if years == 1 else "year_many"
    return get_label(key, language, n=years)
