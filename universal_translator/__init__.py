"""Universal Translator: text translation API with multi-provider fallback."""
