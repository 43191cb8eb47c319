"""
Command-line interface for LHC Calculator.

Parses options into calculation inputs, calls the engine and renders the
results with the formatting helpers and display labels.
"""

import sys

import click
import structlog
from pydantic import ValidationError

from lhc_calculator.config import ConfigurationError, load_scenarios, load_settings
from lhc_calculator.config.regulatory import (
    FINANCIAL_YEAR,
    InvalidInputError,
    mls_tier_table,
)
from lhc_calculator.core.calculator import DelayCostCalculator, compute_break_even_income
from lhc_calculator.core.validation import validate_inputs
from lhc_calculator.domain.enums import Language
from lhc_calculator.domain.models import (
    BreakEvenQuery,
    DelayAnalysis,
    DelayCostInput,
    MlsTier,
    ValidationInput,
)
from lhc_calculator.utils.formatting import format_currency, format_percentage
from lhc_calculator.utils.labels import format_years, get_label
from lhc_calculator.utils.logging import configure_logging


logger = structlog.get_logger()


@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to settings file",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output",
)
@click.option(
    "--json-logs",
    is_flag=True,
    help="Output logs as JSON",
)
@click.option(
    "--lang",
    type=click.Choice([lang.value for lang in Language]),
    default=None,
    help="Display language (default: from settings)",
)
@click.pass_context
def main(ctx, config, verbose, json_logs, lang):
    """Should I buy hospital cover now? Australian MLS and LHC calculator."""
    ctx.ensure_object(dict)

    try:
        settings = load_settings(config)
    except (ConfigurationError, ValidationError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(level=log_level, json_output=json_logs or settings.json_logs)

    ctx.obj["settings"] = settings
    ctx.obj["language"] = Language(lang) if lang else settings.language


DELAY_OPTIONS = [
    click.option("--age", type=int, required=True, help="Current age"),
    click.option("--income", type=float, required=True, help="Annual taxable income"),
    click.option(
        "--premium",
        type=float,
        default=None,
        help="Base annual hospital premium (default: from settings)",
    ),
    click.option(
        "--delay-years",
        type=float,
        default=None,
        help="Years to delay buying cover (default: from settings)",
    ),
    click.option("--family/--single", default=False, help="Family or single thresholds"),
    click.option("--children", type=int, default=0, help="Number of dependent children"),
    click.option("--immigrant", is_flag=True, help="Arrived in Australia as an adult"),
    click.option("--medicare-age", type=int, default=None, help="Age when Medicare was obtained"),
    click.option("--no-validate", is_flag=True, help="Skip input range checks"),
]


def delay_options(func):
    """Add the options shared by commands that take a full set of delay inputs."""
    for option in reversed(DELAY_OPTIONS):
        func = option(func)
    return func


def _build_inputs(ctx, age, income, premium, delay_years, family, children,
                  immigrant, medicare_age, no_validate) -> DelayCostInput:
    settings = ctx.obj["settings"]
    language = ctx.obj["language"]

    inputs = DelayCostInput(
        age=age,
        income=income,
        premium=premium if premium is not None else settings.default_premium,
        delay_years=delay_years if delay_years is not None else settings.default_delay_years,
        is_family=family,
        is_immigrant=immigrant,
        medicare_age=medicare_age,
        num_children=children,
    )

    if not no_validate:
        errors = validate_inputs(
            ValidationInput(
                age=inputs.age,
                income=inputs.income,
                premium=inputs.premium,
                delay_years=inputs.delay_years,
            )
        )
        if errors:
            click.echo(get_label("validation_failed", language), err=True)
            for error in errors:
                click.echo(f"  - {error}", err=True)
            sys.exit(1)

    return inputs


def _signed_currency(amount: float) -> str:
    return f"-{format_currency(amount)}" if amount < 0 else format_currency(amount)


def _tier_text(tier: MlsTier, language: Language) -> str:
    if tier.range_end == float("inf"):
        return get_label(
            "mls_tier_top",
            language,
            index=tier.tier_index,
            start=format_currency(tier.range_start - 1),
        )
    return get_label(
        "mls_tier",
        language,
        index=tier.tier_index,
        start=format_currency(tier.range_start),
        end=format_currency(tier.range_end),
    )


def _render_analysis(analysis: DelayAnalysis, language: Language) -> None:
    result = analysis.result
    years = format_years(analysis.inputs.delay_years, language)

    click.echo(get_label("title", language))
    click.echo(get_label("results", language))
    click.echo(f"{get_label('net_cost', language, years=years)}: {_signed_currency(result.net_cost)}")
    click.echo(f"  {get_label('loading_cost', language)}: {format_currency(result.loading_cost)}")
    click.echo(f"  {get_label('mls_cost', language)}: {format_currency(result.mls_cost)}")
    click.echo(f"  {get_label('saved_premium', language)}: {format_currency(result.saved_premium)}")
    click.echo(
        f"  {get_label('current_loading', language)}: "
        f"{format_percentage(result.current_loading, for_loading=True)}"
    )
    click.echo(
        f"  {get_label('mls_rate', language)}: {format_percentage(result.mls_rate)} "
        f"({_tier_text(analysis.mls_tier, language)})"
    )

    if analysis.break_even_income == float("inf"):
        click.echo(f"  {get_label('break_even_never', language)}")
    else:
        click.echo(
            f"  {get_label('break_even_income', language)}: "
            f"{format_currency(analysis.break_even_income)}"
        )

    click.echo(
        get_label(
            f"outcome.{analysis.outcome.value}",
            language,
            years=years,
            amount=format_currency(result.net_cost),
        )
    )
    click.echo(get_label(f"recommendation.{analysis.recommendation.value}", language))
    click.echo(get_label(f"age_warning.{analysis.age_warning.value}", language))

    risks = analysis.risk_factors
    mls_paid = format_currency(risks.mls_cost)
    loading_added = format_percentage(risks.loading_increase, for_loading=True)
    click.echo(get_label("risk_factors", language))
    click.echo(f"  {get_label('risk.mls_cost', language, years=years, amount=mls_paid)}")
    click.echo(f"  {get_label('risk.loading_increase', language, percent=loading_added)}")
    click.echo(f"  {get_label('risk.waiting_period', language)}")
    click.echo(get_label("medical_disclaimer", language))


@main.command()
@delay_options
@click.option("--as-json", is_flag=True, help="Print the analysis as JSON")
@click.pass_context
def calculate(ctx, as_json, **options):
    """Calculate the net cost of delaying hospital cover.

    Examples:

    \b
    # Single, 28, earning $120,000, delaying 2 years
    lhc-calc calculate --age 28 --income 120000 --delay-years 2

    \b
    # Adult immigrant who got Medicare at 39
    lhc-calc calculate --age 42 --income 150000 --family --immigrant --medicare-age 39
    """
    inputs = _build_inputs(ctx, **options)
    calculator = DelayCostCalculator(ctx.obj["settings"])

    try:
        analysis = calculator.analyse(inputs)
    except InvalidInputError as e:
        click.echo(f"{get_label('error', ctx.obj['language'])} {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(analysis.model_dump_json(indent=2))
        return

    _render_analysis(analysis, ctx.obj["language"])


@main.command()
@delay_options
@click.option(
    "--horizon",
    "horizons",
    type=float,
    multiple=True,
    help="Delay years to compare (repeatable, default: from settings)",
)
@click.pass_context
def compare(ctx, horizons, **options):
    """Compare the net cost of several delay horizons."""
    language = ctx.obj["language"]
    inputs = _build_inputs(ctx, **options)
    calculator = DelayCostCalculator(ctx.obj["settings"])

    try:
        scenarios = calculator.compare(inputs, horizons or None)
    except InvalidInputError as e:
        click.echo(f"{get_label('error', language)} {e}", err=True)
        sys.exit(1)

    click.echo(get_label("comparison", language))
    click.echo(f"{get_label('delay_years', language):<12} {get_label('cost', language):>12}")
    for scenario in scenarios:
        net_cost = scenario.result.net_cost
        line = f"{format_years(scenario.delay_years, language):<12} {_signed_currency(net_cost):>12}"
        if net_cost < 0:
            line += f" {get_label('saving_suffix', language)}"
        line += f"  {get_label(f'recommendation.{scenario.recommendation.value}', language)}"
        if scenario.is_best:
            line += f"  <- {get_label('best_option', language)}"
        click.echo(line)


@main.command("break-even")
@click.option("--premium", type=float, required=True, help="Base annual hospital premium")
@click.option("--loading", type=float, default=0.0, help="Current LHC loading as a fraction")
@click.option("--mls-rate", type=float, required=True, help="MLS rate as a fraction")
@click.pass_context
def break_even(ctx, premium, loading, mls_rate):
    """Find the income at which buying now breaks even."""
    language = ctx.obj["language"]
    income = compute_break_even_income(
        BreakEvenQuery(premium=premium, current_loading=loading, mls_rate=mls_rate)
    )

    if income == float("inf"):
        click.echo(get_label("break_even_never", language))
    else:
        click.echo(f"{get_label('break_even_income', language)}: {format_currency(income)}")


@main.command()
@click.option("--family/--single", default=False, help="Family or single thresholds")
@click.option("--children", type=int, default=0, help="Number of dependent children")
@click.pass_context
def tiers(ctx, family, children):
    """Show the MLS tiers for a household."""
    language = ctx.obj["language"]

    click.echo(get_label("mls_tiers", language, year=FINANCIAL_YEAR))
    for tier in mls_tier_table(family, children):
        click.echo(f"  {format_percentage(tier.rate):>6}  {_tier_text(tier, language)}")


@main.command()
@click.argument("scenario_file", type=click.Path(exists=True))
@click.pass_context
def batch(ctx, scenario_file):
    """Calculate every scenario in a YAML file."""
    language = ctx.obj["language"]
    calculator = DelayCostCalculator(ctx.obj["settings"])

    try:
        scenarios = load_scenarios(scenario_file)
        for index, inputs in enumerate(scenarios, start=1):
            analysis = calculator.analyse(inputs)
            click.echo(
                f"#{index}: {format_years(inputs.delay_years, language)} "
                f"{_signed_currency(analysis.result.net_cost)} "
                f"({get_label(f'recommendation.{analysis.recommendation.value}', language)})"
            )
    except (ConfigurationError, InvalidInputError) as e:
        logger.error("batch_failed", file=scenario_file, error=str(e))
        click.echo(f"{get_label('error', language)} {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
