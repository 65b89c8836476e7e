"""
Command-line interface for the Toast simulator.
"""

import click
import json
import logging

from .config import RUN_PRESETS, SimulationConfig, get_preset, load_config_from_json
from .pipeline import run_simulation, results_to_json
from .diagnostics import format_diagnostics


@click.command()
@click.option(
    '--n-games', '-n',
    type=int,
    default=None,
    help='Number of games to simulate (default: 10000)'
)
@click.option(
    '--seed',
    type=int,
    help='Random seed for reproducibility'
)
@click.option(
    '--preset', '-p',
    type=click.Choice(list(RUN_PRESETS.keys())),
    default=None,
    help='Use a preset run configuration'
)
@click.option(
    '--config', '-c', 'config_file',
    type=click.Path(exists=True),
    help='Run config JSON file (overrides --preset)'
)
@click.option(
    '--copies-per-value',
    type=int,
    default=None,
    help='Copies of each face value 1-6 per deck (default: 4, a 24-card deck)'
)
@click.option(
    '--confidence',
    type=float,
    default=0.95,
    help='Confidence level for the win-rate interval (default: 0.95)'
)
@click.option(
    '--output', '-o',
    type=click.Path(),
    help='Output file for results JSON'
)
@click.option(
    '--details/--no-details',
    default=False,
    help='Print win-rate interval and per-game diagnostics after the summary'
)
@click.option(
    '--verbose/--quiet', '-v/-q',
    default=False,
    help='Log progress to stderr'
)
def main(
    n_games,
    seed,
    preset,
    config_file,
    copies_per_value,
    confidence,
    output,
    details,
    verbose
):
    """
    Estimate the chance of clearing a full Toast deck.

    Prints '<wins> of <attempts> attempts won'.
    """
    if verbose:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    if n_games is not None and n_games <= 0:
        raise click.BadParameter("n-games must be a positive integer", param_hint="'--n-games'")
    if copies_per_value is not None and copies_per_value <= 0:
        raise click.BadParameter(
            "copies-per-value must be a positive integer", param_hint="'--copies-per-value'"
        )
    if not 0 < confidence < 1:
        raise click.BadParameter("confidence must be between 0 and 1", param_hint="'--confidence'")

    if config_file:
        try:
            config = load_config_from_json(config_file)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="'--config'") from e
    elif preset:
        config = get_preset(preset)
    else:
        config = SimulationConfig()

    config = config.with_overrides(
        n_games=n_games,
        seed=seed,
        copies_per_value=copies_per_value,
    )

    results = run_simulation(config, confidence=confidence)

    click.echo(results['result'].summary_line())

    if details:
        click.echo("")
        click.echo(format_diagnostics(results['diagnostics'], results['estimate']))

    if output:
        with open(output, 'w') as f:
            json.dump(results_to_json(results), f, indent=2)
        click.echo(f"Results saved to {output}", err=True)


if __name__ == '__main__':
    main()
