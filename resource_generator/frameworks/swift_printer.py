"""Deterministic Swift rendering of the code model."""

from typing import Iterable, List

from ..core.code_model import (
    STDLIB,
    Function,
    FunctionParameter,
    Init,
    LetBinding,
    Struct,
    TypeReference,
    VarGetter,
)

ACCESS_LEVELS = ('internal', 'public')


class SwiftPrinter:
    """
    Render code model trees as Swift source.

    One depth-first traversal, two space indentation. Names, order and types
    are taken from the tree as they are; the access level only adds a
    ``public`` prefix to declarations.
    """

    INDENT = '  '

    def __init__(self, access_level: str = 'internal', tool_name: str = 'swift-resource-generator'):
        if access_level not in ACCESS_LEVELS:
            raise ValueError(f"Unsupported access level '{access_level}'. Valid options: {', '.join(ACCESS_LEVELS)}")
        self.access_level = access_level
        self.tool_name = tool_name

    @property
    def prefix(self) -> str:
        return 'public ' if self.access_level == 'public' else ''

    def render(self, node) -> str:
        """Render one declaration, including its children."""
        return '\n'.join(self._render(node, 0))

    def render_file(self, root: Struct, additional_imports: Iterable[str] = ()) -> str:
        """
        Render a complete source file for a root struct.

        Args:
            root: Root struct, instantiated as ``R``
            additional_imports: Modules imported besides the inferred ones

        Returns:
            File contents, ending with a newline
        """
        modules = sorted((root.modules() | set(additional_imports)) - {STDLIB})

        lines = [
            '//',
            '// This is a generated file, do not edit!',
            f'// Generated by {self.tool_name}',
            '//',
            '',
        ]
        lines.extend(f'import {module}' for module in modules)
        lines.append('')
        lines.append('private class BundleFinder {}')
        lines.append(f'{self.prefix}let R = {root.name.value}(bundle: Bundle(for: BundleFinder.self))')
        lines.append('')
        lines.extend(self._render(root, 0))

        return '\n'.join(lines) + '\n'

    def render_type(self, reference: TypeReference) -> str:
        name = f"{reference.module}.{reference.name}" if reference.is_qualified else reference.name
        if reference.generic_args:
            args = ', '.join(self.render_type(arg) for arg in reference.generic_args)
            name = f"{name}<{args}>"
        return name

    def _render(self, node, depth: int) -> List[str]:
        if isinstance(node, Struct):
            return self._render_struct(node, depth)
        if isinstance(node, Init):
            return self._render_init(node, depth)
        if isinstance(node, LetBinding):
            return self._render_let(node, depth)
        if isinstance(node, VarGetter):
            return self._render_var(node, depth)
        if isinstance(node, Function):
            return self._render_function(node, depth)
        raise TypeError(f"Cannot render {type(node).__name__}")

    def _indent(self, depth: int) -> str:
        return self.INDENT * depth

    def _render_comments(self, comments, depth: int) -> List[str]:
        indent = self._indent(depth)
        return [f"{indent}/// {line}" if line else f"{indent}///" for line in comments]

    def _render_block(self, header: str, code: str, depth: int) -> List[str]:
        """``header { code }`` on one line, or a block for multi-line code."""
        indent = self._indent(depth)
        body = code.splitlines()
        if not body:
            return [f"{indent}{header} {{}}"]
        if len(body) == 1:
            return [f"{indent}{header} {{ {body[0]} }}"]

        inner = self._indent(depth + 1)
        lines = [f"{indent}{header} {{"]
        lines.extend(f"{inner}{line}" if line else '' for line in body)
        lines.append(f"{indent}}}")
        return lines

    def _render_struct(self, struct: Struct, depth: int) -> List[str]:
        indent = self._indent(depth)
        lines = self._render_comments(struct.comments, depth)

        conformances = ''
        if struct.protocols:
            conformances = ': ' + ', '.join(self.render_type(p) for p in struct.protocols)
        lines.append(f"{indent}{self.prefix}struct {struct.name.value}{conformances} {{")

        for member in struct.members:
            if isinstance(member, Struct):
                lines.append('')
            lines.extend(self._render(member, depth + 1))

        lines.append(f"{indent}}}")
        return lines

    def _render_init(self, init: Init, depth: int) -> List[str]:
        indent = self._indent(depth)
        lines = self._render_comments(init.comments, depth)
        lines.extend(
            f"{indent}{self.prefix}let {p.name}: {self.render_type(p.type_reference)}"
            for p in init.params
        )

        # Memberwise initializers are internal, public structs need their own
        if self.access_level == 'public':
            params = ', '.join(self._render_param(p) for p in init.params)
            assignments = '\n'.join(f"self.{p.name} = {p.name}" for p in init.params)
            lines.extend(self._render_block(f"public init({params})", assignments, depth))

        return lines

    def _render_let(self, binding: LetBinding, depth: int) -> List[str]:
        lines = self._render_comments(binding.comments, depth)
        static = 'static ' if binding.is_static else ''
        annotation = ''
        if binding.type_reference is not None:
            annotation = f": {self.render_type(binding.type_reference)}"
        lines.append(
            f"{self._indent(depth)}{self.prefix}{static}let {binding.name.value}{annotation} = {binding.value_code}"
        )
        return lines

    def _render_var(self, getter: VarGetter, depth: int) -> List[str]:
        lines = self._render_comments(getter.comments, depth)
        header = f"{self.prefix}var {getter.name.value}: {self.render_type(getter.type_reference)}"
        lines.extend(self._render_block(header, getter.value_code, depth))
        return lines

    def _render_function(self, function: Function, depth: int) -> List[str]:
        lines = self._render_comments(function.comments, depth)
        static = 'static ' if function.is_static else ''
        params = ', '.join(self._render_param(p) for p in function.params)
        header = f"{self.prefix}{static}func {function.name.value}({params})"
        if function.throws:
            header += ' throws'
        if function.return_type is not None:
            header += f" -> {self.render_type(function.return_type)}"
        lines.extend(self._render_block(header, function.body, depth))
        return lines

    def _render_param(self, param: FunctionParameter) -> str:
        label = param.name
        if param.local_name and param.local_name != param.name:
            label = f"{param.name} {param.local_name}"
        rendered = f"{label}: {self.render_type(param.type_reference)}"
        if param.default_value is not None:
            rendered += f" = {param.default_value}"
        return rendered
