"""
This package contains the core domain models and rules of the Conversion Preset engine.

The domain layer knows nothing about files, YAML or the command line. It is the
part a host application embeds to edit presets.

Modules:
    exceptions.py: Custom exception types raised by the engine.
    formats.py: The `OutputType` and `EncodingMode` enumerations.
    output_policy.py: Which settings each output format uses, and their defaults.
    settings_store.py: `SettingsStore`, the ordered string map holding settings,
                       with typed read-back accessors.
    notifier.py: `ChangeNotifier`, the synchronous change handler list.
    validation.py: Name validation returning display messages.
    preset.py: `ConversionPreset`, which ties all of the above together.
"""
