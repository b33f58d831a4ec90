"""prh: project-release hooks for monorepo workspaces."""

__version__ = "0.3.0"
