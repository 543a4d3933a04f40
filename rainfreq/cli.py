"""
Command-line interface for RainFreq.
"""

import click
from pathlib import Path

from .config import load_config
from .exceptions import RainFreqError
from .io import load_rainfall, get_durations, get_duration_rain, get_station
from .io.load_rainfall import MISSING_SENTINEL
from .analysis import (
    Distribution, CONFIDENCE_LEVELS, estimate, frequency_table,
    classify_return_periods, KSTest, ChiSquareTest,
    summarize_samples, goodness_of_fit_summary, best_fit,
)
from .visualization import (
    set_rainfreq_style, plot_ks_test, plot_ks_probability,
    plot_frequency_curves, plot_annual_rainfall,
)


def _parse_distribution(ctx, param, value):
    if value is None:
        return None
    try:
        return Distribution.parse(value)
    except RainFreqError as e:
        raise click.BadParameter(str(e))


def _load_sample(rainfall, duration):
    df = load_rainfall(rainfall)
    try:
        return get_duration_rain(df, duration)
    except KeyError as e:
        raise click.BadParameter(str(e.args[0]), param_hint="'--duration'")


@click.group()
@click.version_option()
def cli():
    """RainFreq: Rainfall Frequency Analysis."""
    pass


@cli.command()
@click.option('--rainfall', type=click.Path(exists=True), help='Path to annual maximum rainfall CSV')
@click.option('--duration', 'durations', multiple=True, type=int, help='Duration(s) in minutes. Default: all.')
@click.option('--distribution', 'distributions', multiple=True, help='Distribution(s) to fit. Default: all five.')
@click.option('--return-period', 'return_periods', multiple=True, type=float, help='Return period(s) in years.')
@click.option('--confidence', 'confidence_index', type=click.IntRange(0, 4), help='Confidence level index: 0=85%, 1=90%, 2=95%, 3=97.5%, 4=99%')
@click.option('--config', type=click.Path(exists=True), help='Path to config YAML')
@click.option('--output-dir', help='Output directory')
@click.option('--no-figures', is_flag=True, help='Skip figure generation')
def analyze(rainfall, durations, distributions, return_periods, confidence_index, config, output_dir, no_figures):
    """Run frequency analysis and goodness-of-fit tests."""

    # 1. Setup Configuration
    try:
        cfg = load_config(
            config,
            rainfall_file=rainfall,
            durations=list(durations) or None,
            distributions=list(distributions) or None,
            return_periods=list(return_periods) or None,
            confidence_index=confidence_index,
            output_dir=output_dir,
            make_figures=False if no_figures else None,
        )
    except ValueError as e:
        raise click.ClickException(str(e))

    # 2. Load Data
    click.echo("📥 Loading rainfall data...")
    df = load_rainfall(cfg.rainfall_file)
    if cfg.station_id is None:
        station = get_station(df)
        cfg.station_id = station if station != 'N/A' else Path(cfg.rainfall_file).stem

    available = get_durations(df)
    selected = cfg.durations or available
    missing = [d for d in selected if d not in available]
    if missing:
        raise click.ClickException(f"Durations not in file: {missing}; available: {available}")

    cfg.create_output_dirs()
    click.echo(f"🚀 Starting RainFreq analysis for station {cfg.station_id}")
    click.echo(f"📂 Output directory: {cfg.output_run_dir}")

    samples = {d: get_duration_rain(df, d) for d in selected}
    for d, sample in samples.items():
        click.echo(f"   {d:>5} min: {len(sample)} years")

    # 3. Analysis
    click.echo("📊 Computing statistics...")
    summarize_samples(samples).to_csv(cfg.tables_dir / "statistics.csv", index=False)

    if cfg.make_figures:
        set_rainfreq_style(dpi=cfg.figure_dpi)

    level = CONFIDENCE_LEVELS[cfg.confidence_index]
    ks = KSTest(cfg.confidence_index)
    chi = ChiSquareTest()

    for d, sample in samples.items():
        if len(sample) < 3:
            click.echo(f"⚠️  Skipping {d} min: need at least 3 values, found {len(sample)}")
            continue

        click.echo(f"   Duration {d} min: frequency analysis...")
        table = frequency_table(sample, cfg.return_periods, cfg.distribution_types)
        table.to_csv(cfg.tables_dir / f"frequency_{d}.csv")

        click.echo(f"   Duration {d} min: goodness of fit ({level})...")
        for dist in cfg.distribution_types:
            ks_result = ks.run(dist, sample)
            ks_result.to_frame().to_csv(
                cfg.tables_dir / f"ks_{d}_{dist.short_name}.csv", index=False
            )
            chi_result = chi.run(dist, sample, cfg.confidence_index)
            (cfg.tables_dir / f"chi_square_{d}_{dist.short_name}.txt").write_text(chi_result.report())

            if cfg.make_figures:
                plot_ks_test(
                    ks_result,
                    output_path=cfg.figures_dir / f"ks_{d}_{dist.short_name}.{cfg.figure_format}"
                )
                plot_ks_probability(
                    ks_result,
                    output_path=cfg.figures_dir / f"prob_{d}_{dist.short_name}.{cfg.figure_format}"
                )

        fit = goodness_of_fit_summary(sample, cfg.confidence_index, cfg.distribution_types)
        fit.to_csv(cfg.tables_dir / f"fit_summary_{d}.csv", index=False)
        for _, row in fit.iterrows():
            ks_flag = "pass" if row['ks_fitted'] else "fail"
            chi_flag = "pass" if row['chi2_fitted'] else "fail"
            click.echo(f"      {row['distribution']:<12} KS {ks_flag:<4}  Chi2 {chi_flag:<4}  SSE {row['sse']:.2f}")
        best = best_fit(fit)
        if best:
            click.echo(f"      -> Best fit: {best}")

        if cfg.make_figures:
            plot_frequency_curves(
                sample, table,
                title=f"Rainfall Frequency ({d} min)",
                output_path=cfg.figures_dir / f"frequency_{d}.{cfg.figure_format}"
            )
            plot_annual_rainfall(
                df, d,
                output_path=cfg.figures_dir / f"annual_{d}.{cfg.figure_format}"
            )

    cfg.save()
    click.echo("✅ Analysis complete!")


@cli.command(name='estimate')
@click.option('--rainfall', required=True, type=click.Path(exists=True), help='Path to annual maximum rainfall CSV')
@click.option('--duration', required=True, type=int, help='Duration in minutes')
@click.option('--distribution', required=True, callback=_parse_distribution, help='Distribution name or code (1-5)')
@click.option('--return-period', required=True, type=float, help='Return period in years')
def estimate_cmd(rainfall, duration, distribution, return_period):
    """Estimate the T-year rainfall for one distribution."""
    sample = _load_sample(rainfall, duration)
    try:
        result = estimate(distribution, sample, return_period)
    except RainFreqError as e:
        raise click.ClickException(str(e))
    click.echo(f"Distribution: {distribution.label}")
    click.echo(f"Return period T = {return_period:g} years")
    click.echo(f"Frequency factor Kt = {result.kt:.4f}")
    click.echo(f"Estimate Qest = {result.qest:.4f}")


@cli.command(name='find-rp')
@click.option('--rainfall', required=True, type=click.Path(exists=True), help='Path to annual maximum rainfall CSV')
@click.option('--duration', required=True, type=int, help='Duration in minutes')
@click.argument('value', type=float)
def find_rp(rainfall, duration, value):
    """Find the return-period class of a rainfall VALUE."""
    if value <= 0:
        raise click.BadParameter("Rainfall value must be positive", param_hint="'VALUE'")
    sample = _load_sample(rainfall, duration)
    try:
        classes = classify_return_periods(value, sample)
    except RainFreqError as e:
        raise click.ClickException(str(e))
    for dist, label in classes.items():
        click.echo(f"{dist.label:<36} {label} years")


@cli.command()
@click.option('--rainfall', required=True, type=click.Path(exists=True), help='Path to annual maximum rainfall CSV')
def durations(rainfall):
    """List the durations in a rainfall file."""
    df = load_rainfall(rainfall)
    click.echo(f"Station: {get_station(df)}")
    for d in get_durations(df):
        n = int((df[d].notna() & (df[d] >= MISSING_SENTINEL)).sum())
        click.echo(f"{d:>6} min  n = {n}")


if __name__ == '__main__':
    cli()
