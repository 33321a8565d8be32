"""
Configuration Package for the Conversion Preset engine.

This package centralizes all the static configuration settings for the application.
By separating configuration from the application logic, it becomes easier to manage
and modify parameters without changing the core code.

This package includes settings for:
- Logging format and levels, with user overrides read from `config.user.yaml`.
- Preset naming rules and the field names of serialized preset documents.
- Audio setting keys, their default values and the recognised input extensions.
"""
