"""Bundle module."""

from monobuild.modules.bundle.rollup import Bundler, RollupBundler, bundle_options, bundle_package

__all__ = ["Bundler", "RollupBundler", "bundle_options", "bundle_package"]
