"""Input, configuration and metadata schemas."""

from health_inequality.schema.fitted import FittedDistribution
from health_inequality.schema.run_config import RunConfig
from health_inequality.schema.run_meta import ReproducibilityContext, RunMeta

__all__ = ["FittedDistribution", "ReproducibilityContext", "RunConfig", "RunMeta"]
