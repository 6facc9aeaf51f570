"""Tests for the segue, accessibility identifier and reuse identifier builders."""

from resource_generator.core.code_model import TypeReference
from resource_generator.core.generator import GeneratorOptions, generate
from resource_generator.core.identifiers import SymbolName
from resource_generator.core.models import (
    LocaleReference,
    NibResource,
    ProjectResources,
    ResourceKind,
    Reusable,
    Segue,
    StoryboardResource,
    ViewController,
)
from resource_generator.features.accessibility import generate_accessibility_identifier_struct
from resource_generator.features.reusables import generate_reuse_identifier_struct
from resource_generator.features.segues import DEFAULT_DESTINATION, collect_segues, generate_segue_struct
from resource_generator.frameworks.swift_printer import SwiftPrinter

ROOT = SymbolName('_R')

LIST = TypeReference('ListViewController')
DETAIL = TypeReference('DetailViewController')


def ignore(message):
    pass


def main_storyboard():
    return StoryboardResource(
        name='Main',
        view_controllers=(
            ViewController('a', LIST, segues=(
                Segue('showDetail', 'b'),
                Segue('showDetail', 'b'),
                Segue('present', 'elsewhere', TypeReference('FadeSegue')),
            )),
            ViewController('b', DETAIL, 'detail'),
        ),
    )


class TestSegueStruct:
    """Test cases for generate_segue_struct()."""

    def test_collect_resolves_destinations(self):
        infos = collect_segues([main_storyboard()])

        assert [i.identifier for i in infos] == ['showDetail', 'present']
        assert infos[0].destination == DETAIL
        assert infos[0].segue_type == TypeReference('UIStoryboardSegue', 'UIKit')
        assert infos[1].destination == DEFAULT_DESTINATION

    def test_segues(self):
        warnings = []
        struct = generate_segue_struct([main_storyboard()], ROOT, warnings.append)
        text = SwiftPrinter().render(struct)

        assert warnings == []
        assert 'let listViewController = listViewController()' in text
        assert '/// Segues from `ListViewController`.' in text
        assert (
            'let showDetail: RswiftResources.SegueIdentifier<UIKit.UIStoryboardSegue, ListViewController, '
            'DetailViewController> = .init(identifier: "showDetail")'
        ) in text
        assert (
            'let present: RswiftResources.SegueIdentifier<FadeSegue, ListViewController, UIKit.UIViewController> '
            '= .init(identifier: "present")'
        ) in text
        assert text.index('let present:') < text.index('let showDetail:')
        assert struct.comments == (
            "This `_R.segue` struct is generated, and contains static references to 1 view controllers.",
        )

    def test_conflicting_destinations(self):
        other = StoryboardResource(
            name='Other',
            view_controllers=(
                ViewController('x', LIST, segues=(Segue('showDetail', 'y'),)),
                ViewController('y', TypeReference('SettingsViewController')),
            ),
        )
        warnings = []
        struct = generate_segue_struct([main_storyboard(), other], ROOT, warnings.append)
        text = SwiftPrinter().render(struct)

        assert warnings == [
            "Skipping 2 segues for 'ListViewController' because symbol 'showDetail' would be generated "
            "for all of these segues, but with a different destination or segue type"
        ]
        assert 'showDetail' not in text
        assert 'let present:' in text

    def test_empty(self):
        assert generate_segue_struct([], ROOT, ignore).is_empty
        assert generate_segue_struct([StoryboardResource('Main')], ROOT, ignore).is_empty


class TestAccessibilityIdentifierStruct:
    """Test cases for generate_accessibility_identifier_struct()."""

    def test_files_are_merged_and_sorted(self):
        nibs = [
            NibResource('Cell', used_accessibility_identifiers=('title', 'price')),
            NibResource('Cell', LocaleReference.from_language('nl'), used_accessibility_identifiers=('title', 'subtitle')),
        ]
        storyboards = [StoryboardResource('Main', used_accessibility_identifiers=('login',))]
        struct = generate_accessibility_identifier_struct(nibs, storyboards, ROOT, ignore)
        text = SwiftPrinter().render(struct)

        assert 'let cell = cell()' in text
        assert 'let main = main()' in text
        assert '/// Accessibility identifiers from file `Cell`.' in text
        assert text.count('let title: String = "title"') == 1
        assert text.index('let price:') < text.index('let subtitle:') < text.index('let title:')
        assert struct.comments == (
            "This `_R.id` struct is generated, and contains static references to accessibility "
            "identifiers of 2 files.",
        )

    def test_duplicates(self):
        warnings = []
        storyboards = [StoryboardResource('Main', used_accessibility_identifiers=('data-file', 'data.file', 'login'))]
        struct = generate_accessibility_identifier_struct([], storyboards, ROOT, warnings.append)
        text = SwiftPrinter().render(struct)

        assert warnings == [
            "Skipping 2 accessibility identifiers in 'Main' because symbol 'dataFile' would be generated "
            "for all of these accessibility identifiers: data-file, data.file"
        ]
        assert 'dataFile' not in text
        assert 'let login: String = "login"' in text

    def test_files_without_identifiers_are_skipped(self):
        struct = generate_accessibility_identifier_struct([NibResource('Header')], [], ROOT, ignore)
        assert struct.is_empty


class TestReuseIdentifierStruct:
    """Test cases for generate_reuse_identifier_struct()."""

    def test_reuse_identifiers(self):
        product_cell = Reusable('cell', TypeReference('ProductCell'))
        nibs = [
            NibResource('Cell', reusables=(product_cell,)),
            NibResource('Cell', LocaleReference.from_language('nl'), reusables=(product_cell,)),
        ]
        storyboards = [StoryboardResource('Main', reusables=(
            Reusable('cell', TypeReference('OtherCell')),
            Reusable('header', TypeReference('UIView', 'UIKit')),
        ))]
        warnings = []
        struct = generate_reuse_identifier_struct(nibs, storyboards, ROOT, warnings.append)
        text = SwiftPrinter().render(struct)

        assert warnings == [
            "Reuse identifier 'cell' is used for different types (OtherCell, ProductCell), "
            "generating it for ProductCell"
        ]
        assert text.count('let cell:') == 1
        assert 'let cell: RswiftResources.ReuseIdentifier<ProductCell> = .init(identifier: "cell")' in text
        assert 'let header: RswiftResources.ReuseIdentifier<UIKit.UIView> = .init(identifier: "header")' in text
        assert struct.comments == (
            "This `_R.reuseIdentifier` struct is generated, and contains static references to 2 reuse identifiers.",
        )

    def test_empty(self):
        assert generate_reuse_identifier_struct([NibResource('Cell')], [], ROOT, ignore).is_empty


class TestInterfaceKinds:
    """The interface identifier kinds inside the generated root struct."""

    def resources(self):
        return ProjectResources(
            nibs=[NibResource(
                'Cell',
                reusables=(Reusable('cell', TypeReference('ProductCell')),),
                used_accessibility_identifiers=('title',),
            )],
            storyboards=[main_storyboard()],
        )

    def test_kind_order_and_let_style(self):
        result = generate(self.resources())
        text = result.text

        assert result.generated_kinds == [
            ResourceKind.SEGUE,
            ResourceKind.ID,
            ResourceKind.NIB,
            ResourceKind.REUSE_IDENTIFIER,
            ResourceKind.STORYBOARD,
        ]
        assert 'let segue = segue()' in text
        assert 'let id = id()' in text
        assert 'let reuseIdentifier = reuseIdentifier()' in text
        assert 'var segue:' not in text
        assert 'func reuseIdentifier(bundle:' not in text
        assert (
            text.index('struct segue {')
            < text.index('struct id {')
            < text.index('struct nib {')
            < text.index('struct reuseIdentifier {')
            < text.index('struct storyboard {')
        )

    def test_disabled(self):
        options = GeneratorOptions(enabled_kinds=frozenset({ResourceKind.NIB}))
        result = generate(self.resources(), options)

        assert result.generated_kinds == [ResourceKind.NIB]
        assert 'struct segue' not in result.text
