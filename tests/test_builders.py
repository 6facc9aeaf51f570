"""Tests for the file, font, nib, storyboard and property list builders."""

from resource_generator.core.code_model import TypeReference
from resource_generator.core.identifiers import SymbolName
from resource_generator.core.models import (
    FileResource,
    FontResource,
    LocaleReference,
    NibResource,
    PropertyListResource,
    StoryboardResource,
    ViewController,
)
from resource_generator.features.files import generate_file_struct
from resource_generator.features.fonts import generate_font_struct
from resource_generator.features.nibs import generate_nib_struct
from resource_generator.features.property_lists import PropertyListGenerator
from resource_generator.features.storyboards import StoryboardGenerator
from resource_generator.frameworks.swift_printer import SwiftPrinter

ROOT = SymbolName('_R')


def ignore(message):
    pass


class TestFileStruct:
    """Test cases for generate_file_struct()."""

    def test_localized_copies_share_accessor(self):
        resources = [
            FileResource('config', 'json', LocaleReference.from_language('en')),
            FileResource('config', 'json', LocaleReference.from_language('nl')),
        ]
        text = SwiftPrinter().render(generate_file_struct(resources, ROOT, ignore))

        assert text.count('var configJson:') == 1
        assert 'locale: .language("en")' in text

    def test_duplicates(self):
        warnings = []
        resources = [FileResource('data-file', 'txt'), FileResource('data.file', 'txt')]
        generate_file_struct(resources, ROOT, warnings.append)

        assert warnings == [
            "Skipping 2 resource files because symbol 'dataFileTxt' would be generated "
            "for all of these files: data-file.txt, data.file.txt"
        ]

    def test_empty(self):
        assert generate_file_struct([], ROOT, ignore).is_empty


class TestFontStruct:
    """Test cases for generate_font_struct()."""

    def test_fonts(self):
        struct = generate_font_struct([FontResource('Roboto-Bold', 'Roboto-Bold.ttf')], ROOT, ignore)
        text = SwiftPrinter().render(struct)

        assert 'let robotoBold: RswiftResources.FontResource = .init(fontName: "Roboto-Bold", filename: "Roboto-Bold.ttf")' in text
        assert 'func validate() throws { if !robotoBold.canBeLoaded() {' in text
        assert struct.has_function('validate')

    def test_no_fonts_is_empty(self):
        struct = generate_font_struct([], ROOT, ignore)
        assert struct.is_empty
        assert not struct.has_function('validate')


class TestNibStruct:
    """Test cases for generate_nib_struct()."""

    def test_nib_with_root_view_and_image(self):
        nib = NibResource('Cell', root_views=(TypeReference('UITableViewCell', 'UIKit'),), used_images=('icon',))
        struct = generate_nib_struct([nib], ROOT, ignore)
        text = SwiftPrinter().render(struct)

        assert 'var cell: RswiftResources.NibReference<UIKit.UITableViewCell> { .init(name: "Cell", bundle: bundle) }' in text
        assert 'if UIKit.UIImage(named: "icon", in: bundle, compatibleWith: nil) == nil' in text
        assert "Image named 'icon' is used in nib 'Cell', but couldn't be loaded." in text
        assert 'UIKit' in struct.modules()

    def test_default_root_view(self):
        text = SwiftPrinter().render(generate_nib_struct([NibResource('Header')], ROOT, ignore))
        assert 'NibReference<UIKit.UIView>' in text

    def test_empty(self):
        assert generate_nib_struct([], ROOT, ignore).is_empty


class TestStoryboardStruct:
    """Test cases for StoryboardGenerator."""

    def storyboard(self):
        return StoryboardResource(
            name='Main',
            view_controllers=(
                ViewController('1', TypeReference('DetailViewController'), 'detail'),
                ViewController('2', TypeReference('UIViewController', 'UIKit'), 'name'),
                ViewController('3', TypeReference('UIViewController', 'UIKit')),
            ),
            used_colors=('brand',),
        )

    def test_storyboard(self):
        warnings = []
        struct = StoryboardGenerator(warnings.append).generate_struct([self.storyboard()], ROOT)
        text = SwiftPrinter().render(struct)

        assert warnings == ["Skipping 1 view controller because symbol 'name' conflicts with reserved name 'name'"]
        assert 'struct main: RswiftResources.StoryboardReference {' in text
        assert 'let name = "Main"' in text
        assert (
            'var detail: RswiftResources.StoryboardViewControllerIdentifier<DetailViewController> '
            '{ .init(identifier: "detail", storyboard: name, bundle: bundle) }'
        ) in text
        assert 'UIKit.UIColor(named: "brand"' in text
        assert 'func validate() throws { try self.main.validate() }' in text

    def test_empty(self):
        assert StoryboardGenerator(ignore).generate_struct([], ROOT).is_empty


class TestPropertyListStruct:
    """Test cases for PropertyListGenerator."""

    def plists(self):
        return [
            PropertyListResource('Debug', {
                'name': 'App', 'build': 1, 'enabled': True, 'ratio': 0.5,
                'languages': ['en', 'nl'], 'urls': {'scheme': 'app'}, 'debugOnly': 'x',
            }),
            PropertyListResource('Release', {
                'name': 'App', 'build': 2, 'enabled': True, 'ratio': 0.5,
                'languages': ['en', 'nl'], 'urls': {'scheme': 'app'},
            }),
        ]

    def test_info_struct(self):
        struct = PropertyListGenerator('info', True, ignore).generate_struct(self.plists(), ROOT)
        text = SwiftPrinter().render(struct)

        assert 'let name: String = "App"' in text
        assert 'let enabled: Bool = true' in text
        assert 'let ratio: Double = 0.5' in text
        assert 'let languages: [String] = ["en", "nl"]' in text
        assert 'var urls: urls { .init(bundle: bundle) }' in text
        assert 'let scheme: String = "app"' in text
        assert 'build' not in text
        assert 'debugOnly' not in text
        assert struct.comments == (
            "This `_R.info` struct is generated, and contains static references to 5 properties.",
        )

    def test_entitlements_are_let_style(self):
        plists = [PropertyListResource('Debug', {'group': {'id': 'group.app'}})]
        struct = PropertyListGenerator('entitlements', False, ignore).generate_struct(plists, ROOT)
        text = SwiftPrinter().render(struct)

        assert 'let group = group()' in text
        assert 'bundle' not in text

    def test_empty(self):
        assert PropertyListGenerator('info', True, ignore).generate_struct([], ROOT).is_empty
        assert PropertyListGenerator('entitlements', False, ignore).generate_struct([], ROOT).is_empty

    def test_non_finite_doubles(self):
        plists = [PropertyListResource('Debug', {'max': float('inf'), 'min': float('-inf'), 'unset': float('nan')})]
        struct = PropertyListGenerator('entitlements', False, ignore).generate_struct(plists, ROOT)
        text = SwiftPrinter().render(struct)

        assert 'let max: Double = Double.infinity' in text
        assert 'let min: Double = -Double.infinity' in text
        assert 'let unset: Double = Double.nan' in text
        assert 'inf\n' not in text
