class CountryBrowserError(Exception):
    """Base exception for all country_browser errors"""
    pass

class ConfigError(CountryBrowserError):
    """Invalid or inconsistent global.json"""
    pass

class TableStateError(CountryBrowserError):
    """
    Table state transition that breaks an invariant:
    unknown column id, page size outside the allowed set, negative page
    """
    pass

class CountryQueryError(CountryBrowserError):
    """Network or GraphQL failure while fetching the country list"""
    pass

class ExportError(CountryBrowserError):
    """Spreadsheet serialisation failed"""
    pass
