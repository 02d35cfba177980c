"""Aurora CLI - scaffolding tool for Aurora Editor extensions.

This package creates, lists and manages editor extensions through
interactive prompts, template copying and manifest validation, with clear
architectural boundaries:

- **models/**: Manifest, answers and author models
- **persistence/**: JSON I/O, workspace paths and repositories
- **validation/**: Declarative manifest schema and its validator
- **authoring/**: Author resolution, materialization, install and lifecycle
- **commands/**: CLI command handlers and the shared error boundary
- **errors**: Typed error hierarchy with explicit failure states
"""

__version__ = "1.0.0"
