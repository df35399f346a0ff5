"""Sample data and placeholder generators backing the mock backend."""

from vibrovolt.adapters.sample_data.sample_payment_gateway import SamplePaymentGateway
from vibrovolt.adapters.sample_data.sample_station_repository import SampleStationRepository
from vibrovolt.adapters.sample_data.telemetry import PlaceholderTelemetry

__all__ = ["PlaceholderTelemetry", "SamplePaymentGateway", "SampleStationRepository"]
