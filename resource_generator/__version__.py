"""Version information for swift-resource-generator."""

__version__ = "1.2.0"
__author__ = "Sezgin Paksoy"
__description__ = "Strongly typed Swift accessors for iOS project resources"

# Changelog:
# 1.2.0 - Property lists and storyboards
#        - info and entitlements structs from per-configuration plist contents
#        - Storyboard view controller identifiers, name/bundle are reserved
#        - validate() for fonts, nibs and storyboards
#        - print-command for build phase scripts
#
# 1.1.0 - Localization tables
#        - Format specifier unification across locales
#        - Missing/extra translation warnings against Base or development language
#        - UTF-16 .strings files
#        - JSON report with ordered warnings
#
# 1.0.0 - Initial release
#        - Images, colors, data assets and asset catalog namespaces
#        - Files, fonts and nibs
#        - YAML manifest and .resources.yml config
