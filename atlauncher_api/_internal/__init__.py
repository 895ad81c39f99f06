"""Internal modules for the ATLauncher API client.

WARNING: These modules back the public ATLauncherClient and are not
intended for direct use in application code.

Modules:
    dispatch - Request building and response interpretation
    files - Local file payload encoding/decoding
    http - Shared HTTP client configuration
    resources - Endpoint catalogue grouped by resource
"""
