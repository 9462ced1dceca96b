"""sbtctl - prepare sbt workspaces for IDE build import.

Detects the sbt version a workspace pins, provisions the generated
plugin files the build import needs, and computes the sbt invocations
an editor launches to export the build or set up BSP.
"""

__version__ = "0.3.0"
