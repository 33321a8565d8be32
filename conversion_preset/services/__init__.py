"""
Services Package for the Conversion Preset engine.

Services sit between the domain models and the outside world. Currently this is
`serialization_service`, which turns presets into the flat record shape used by
preset documents (and YAML text) and back.
"""
