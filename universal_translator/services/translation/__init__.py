"""Translation providers and the fallback resolver.

Imports are intentionally NOT eagerly loaded here.
Use explicit imports: ``from universal_translator.services.translation.fallback import FallbackTranslationResolver``.
"""
