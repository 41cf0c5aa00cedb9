"""
Main technical analysis engine.

Runs the single synchronous pipeline for a price series:
Price Series → Indicator Calculators → Signal Synthesizer → Analysis Result
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import structlog

from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader, build_config
from .config.validation import ConfigValidator
from .data.models import PriceSeries
from .data.parsers import parse_market_chart
from .errors import ConfigurationError, DataQualityError, SystemFailureError
from .indicators.calculator import IndicatorCalculator
from .logging.config import get_analysis_logger, log_signal_decision
from .models.indicators import AnalysisResult, IndicatorAnalysis
from .signals.insights import Insight, generate_insights
from .signals.synthesizer import SignalSynthesizer
from .utils.time import is_daily_cadence, median_interval_ms

logger = structlog.get_logger(__name__)
analysis_logger = get_analysis_logger(__name__)


class TechnicalAnalysisEngine:
    """
    Coordinator for per-coin technical analysis.

    Configuration is resolved per call with 3-tier precedence (engine
    config < coin overrides from coins.yaml < call overrides). The engine
    keeps no per-series state, so analyses of different coins may run
    concurrently.
    """

    def __init__(
        self,
        config: Optional[DefaultConfig] = None,
        config_dir: Optional[Union[str, Path]] = None
    ) -> None:
        """Initialize the engine, validating the base configuration."""
        self.logger = logger
        self.analysis_logger = analysis_logger

        base_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        self.config_loader = ConfigLoader(
            config_dir=base_loader.config_dir,
            defaults=config or base_loader.defaults,
        )
        self.config = self.config_loader.defaults
        self._check_config(asdict(self.config))

        self.calculator = IndicatorCalculator(self.config)
        self.synthesizer = SignalSynthesizer(self.config)

        self.logger.info("Technical analysis engine initialized", config_dir=str(self.config_loader.config_dir))

    def resolve_config(
        self,
        coin_id: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> DefaultConfig:
        """
        Resolve the effective configuration for a coin.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        if not coin_id and not overrides:
            return self.config

        merged = self.config_loader.merge_config(coin_id, overrides)
        self._check_config(merged, coin_id)
        return build_config(merged)

    def analyze(
        self,
        series: PriceSeries,
        coin_id: Optional[str] = None,
        current_price: Optional[float] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> AnalysisResult:
        """
        Run the full analysis pipeline for one price series.

        Args:
            series: Price series in chronological order
            coin_id: Coin identifier used for coin-level overrides and logging
            current_price: Live price; defaults to the last sample
            overrides: Per-call configuration overrides

        Returns:
            AnalysisResult; short series yield unavailable indicators and a hold signal

        Raises:
            ConfigurationError: If coin or call overrides are invalid
        """
        config = self.resolve_config(coin_id, overrides)
        if config is self.config:
            calculator, synthesizer = self.calculator, self.synthesizer
        else:
            calculator, synthesizer = IndicatorCalculator(config), SignalSynthesizer(config)

        if current_price is None and len(series) > 0:
            current_price = series[-1].price

        indicators = calculator.calculate_indicators(series)

        if current_price is None:
            analysis = IndicatorAnalysis()
        else:
            analysis = synthesizer.analyze(indicators, current_price)

        volatility = calculator.calculate_volatility(series)
        if volatility is not None:
            self._check_cadence(series, coin_id, config)

        result = AnalysisResult(
            coin_id=coin_id,
            current_price=current_price,
            sample_count=len(series),
            indicators=indicators,
            analysis=analysis,
            support_resistance=calculator.calculate_support_resistance(series),
            volatility=volatility,
            pattern=calculator.detect_patterns(series),
            rsi_params=config.rsi,
        )

        log_signal_decision(
            self.analysis_logger,
            coin_id,
            analysis,
            context={"sample_count": len(series), "warmed_up": calculator.is_warmed_up(series)},
        )
        return result

    def analyze_payload(
        self,
        payload: Union[dict[str, Any], str, bytes],
        coin_id: Optional[str] = None,
        current_price: Optional[float] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> AnalysisResult:
        """
        Parse a market-chart payload and analyze it.

        Raises:
            MissingDataError: If the payload has no prices
            MalformedDataError: If the payload cannot be parsed
        """
        series = parse_market_chart(payload)
        return self.analyze(series, coin_id=coin_id, current_price=current_price, overrides=overrides)

    def analyze_portfolio(
        self,
        series_by_coin: Mapping[str, PriceSeries],
        current_prices: Optional[Mapping[str, float]] = None,
        max_workers: Optional[int] = None
    ) -> dict[str, AnalysisResult]:
        """
        Analyze several coins, optionally in parallel.

        Coins whose analysis fails are logged and left out of the result.

        Args:
            series_by_coin: Price series keyed by coin id
            current_prices: Optional live prices keyed by coin id
            max_workers: Thread pool size; None runs sequentially

        Returns:
            Results keyed by coin id, in input order
        """
        current_prices = current_prices or {}
        coin_ids = list(series_by_coin)

        def run(coin_id: str) -> Optional[AnalysisResult]:
            try:
                return self.analyze(
                    series_by_coin[coin_id],
                    coin_id=coin_id,
                    current_price=current_prices.get(coin_id),
                )
            except (DataQualityError, SystemFailureError) as e:
                self.logger.error(
                    "Analysis failed for coin",
                    coin_id=coin_id,
                    error=str(e),
                    error_type=type(e).__name__,
                    context=getattr(e, 'context', {})
                )
                return None

        if max_workers:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                outcomes = list(executor.map(run, coin_ids))
        else:
            outcomes = [run(coin_id) for coin_id in coin_ids]

        return {
            coin_id: result
            for coin_id, result in zip(coin_ids, outcomes)
            if result is not None
        }

    def generate_insights(self, results: Mapping[str, AnalysisResult]) -> list[Insight]:
        """
        Summarize overbought, oversold and strong-buy coins across results.

        Each coin is quoted with the RSI thresholds it was classified with.
        """
        return generate_insights(
            {coin_id: result.analysis for coin_id, result in results.items()},
            self.config.rsi,
            {coin_id: result.rsi_params for coin_id, result in results.items()},
        )

    def _check_config(self, config: dict[str, Any], coin_id: Optional[str] = None) -> None:
        """Raise ConfigurationError when validation reports problems."""
        errors = ConfigValidator.validate_config(config)
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            self.logger.error("Configuration validation failed", coin_id=coin_id, errors=error_msgs)
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(error_msgs)}",
                field=errors[0].field,
                value=errors[0].value,
                context={"coin_id": coin_id},
            )

    def _check_cadence(self, series: PriceSeries, coin_id: Optional[str], config: DefaultConfig) -> None:
        """Warn when annualized volatility is computed from non-daily samples."""
        params = config.volatility
        if is_daily_cadence(series, params.cadence_tolerance) is False:
            self.logger.warning(
                "Volatility annualization assumes daily samples",
                coin_id=coin_id,
                median_interval_ms=median_interval_ms(series),
                annualization_periods=params.annualization_periods,
            )
