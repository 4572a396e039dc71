"""
Interactive class builder.

Collects a class spec through terminal prompts, previews the generated
declaration and saves it to a file.
"""

from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.syntax import Syntax
from rich.table import Table

from so_creator.logging_config import get_logger
from .cli_integration import write_output
from .core.config import GeneratorConfig, load_config
from .core.generator import GenerationResult, generate_code
from .core.resolver import TypeResolver
from .core.schema import ClassSpec, ParameterKeyword, ParameterSpec, Visibility
from .languages.csharp import CSharpGenerator

logger = get_logger(__name__)

NO_TYPE_FOUND = "No type found"


class ClassBuilderInteractiveHandler:
    """Builds a ClassSpec step by step and generates it."""

    def __init__(
        self,
        resolver: Optional[TypeResolver] = None,
        config: Optional[GeneratorConfig] = None,
        console: Console = None,
    ):
        """
        Initialize the interactive builder.

        Args:
            resolver: Type resolver used for validation and the type picker
            config: Generator configuration
            console: Rich console instance (creates new if None)
        """
        self.console = console or Console()
        self.generator = CSharpGenerator(config or load_config("csharp"), resolver)
        self.spec = ClassSpec(name="PlaceHolder")

    @property
    def resolver(self) -> TypeResolver:
        return self.generator.resolver

    def run_interactive(self) -> bool:
        """
        Run the builder menu loop.

        Returns:
            True when the user leaves normally, False on interrupt
        """
        try:
            while True:
                action = self._show_main_menu()

                if action == "quit":
                    return True
                elif action == "name":
                    self.spec.name = Prompt.ask("Class name", default=self.spec.name)
                elif action == "field":
                    self.add_field()
                elif action == "method":
                    self.add_method()
                elif action == "remove":
                    self.remove_member()
                elif action == "preview":
                    self.preview()
                elif action == "save":
                    self.save()

        except KeyboardInterrupt:
            self.console.print("\n[yellow]👋 Class builder cancelled[/yellow]")
            return False

    def _show_main_menu(self) -> str:
        """Show the spec summary and the menu, return the chosen action."""
        self.console.print()
        self.console.print(self._build_spec_table())

        menu_panel = Panel.fit(
            """[cyan]1.[/cyan] ✏️  Rename class
[cyan]2.[/cyan] ➕ Add field
[cyan]3.[/cyan] ➕ Add method
[cyan]4.[/cyan] ➖ Remove member
[cyan]5.[/cyan] 👀 Preview
[cyan]6.[/cyan] 💾 Save
[cyan]q.[/cyan] 🚪 Quit""",
            border_style="blue",
            title="⚡ Class Builder",
        )
        self.console.print(menu_panel)

        choice = Prompt.ask(
            "\n[bold]Choose an option[/bold]",
            choices=["1", "2", "3", "4", "5", "6", "q"],
            default="2",
        )

        choice_map = {
            "1": "name",
            "2": "field",
            "3": "method",
            "4": "remove",
            "5": "preview",
            "6": "save",
            "q": "quit",
        }
        return choice_map.get(choice, "quit")

    def _build_spec_table(self) -> Table:
        table = Table(
            title=f"🧩 {self.spec.name}",
            box=box.ROUNDED,
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("#", style="dim", no_wrap=True)
        table.add_column("Kind")
        table.add_column("Declaration")
        table.add_column("Valid", no_wrap=True)

        index = 1
        for field in self.spec.fields:
            valid = self.generator.is_field_valid(field)
            table.add_row(
                str(index),
                "field",
                f"{field.visibility.value} {field.type_name} {field.name}",
                "[green]✓[/green]" if valid else "[red]✗[/red]",
            )
            index += 1

        for method in self.spec.methods:
            valid = self.generator.is_method_valid(method)
            table.add_row(
                str(index),
                "method",
                self.generator.method_declaration(method),
                "[green]✓[/green]" if valid else "[red]✗[/red]",
            )
            index += 1

        return table

    def type_choices(self, type_name: str) -> List[str]:
        """
        Candidate type names for a typed-in name.

        A resolvable type is offered together with its subtypes, a primitive
        keyword only as itself. Unknown names give [NO_TYPE_FOUND].
        """
        handle = self.resolver.resolve_type(type_name)
        if handle is not None:
            return [type_name] + [sub.name for sub in self.resolver.list_subtypes(handle)]
        if self.resolver.is_primitive_keyword(type_name):
            return [type_name]
        return [NO_TYPE_FOUND]

    def pick_type(self, label: str, default: str = "int") -> Optional[str]:
        """Ask for a type name and let the user pick among its subtypes."""
        type_name = Prompt.ask(label, default=default).strip()
        choices = self.type_choices(type_name)

        if choices == [NO_TYPE_FOUND]:
            self.console.print(f"[red]❌ {NO_TYPE_FOUND}: '{type_name}'[/red]")
            if Confirm.ask("Use it anyway? (it will be skipped on generation)", default=False):
                return type_name
            return None

        if len(choices) == 1:
            return choices[0]

        for i, choice in enumerate(choices, 1):
            self.console.print(f"  [cyan]{i}.[/cyan] {choice}")
        selected = Prompt.ask(
            "Select type",
            choices=[str(i) for i in range(1, len(choices) + 1)],
            default="1",
        )
        return choices[int(selected) - 1]

    def _pick_visibility(self) -> Visibility:
        value = Prompt.ask(
            "Visibility",
            choices=[v.value for v in Visibility],
            default=Visibility.PUBLIC.value,
        )
        return Visibility(value)

    def add_field(self):
        """Prompt for a field and append it."""
        name = Prompt.ask("Field name")
        type_name = self.pick_type("Field type")
        if type_name is None:
            return
        visibility = self._pick_visibility()
        self.spec.add_field(name, type_name, visibility)
        logger.debug("Added field %s: %s", name, type_name)

    def add_method(self):
        """Prompt for a method, its parameters, and append it."""
        name = Prompt.ask("Method name")
        return_type = self.pick_type("Return type", default="void")
        if return_type is None:
            return
        visibility = self._pick_visibility()

        parameters = []
        while Confirm.ask("Add a parameter?", default=False):
            param_name = Prompt.ask("Parameter name")
            param_type = self.pick_type("Parameter type")
            if param_type is None:
                continue
            keyword = Prompt.ask(
                "Keyword",
                choices=[k.value for k in ParameterKeyword],
                default=ParameterKeyword.NONE.value,
            )
            parameters.append(ParameterSpec(param_name, param_type, ParameterKeyword(keyword)))

        self.spec.add_method(name, return_type, parameters, visibility)
        logger.debug("Added method %s with %d parameters", name, len(parameters))

    def remove_member(self):
        """Remove a field or method by its position in the summary table."""
        total = len(self.spec.fields) + len(self.spec.methods)
        if total == 0:
            self.console.print("[yellow]⚠️ Nothing to remove[/yellow]")
            return

        selected = int(
            Prompt.ask("Member number", choices=[str(i) for i in range(1, total + 1)])
        )
        if selected <= len(self.spec.fields):
            del self.spec.fields[selected - 1]
        else:
            del self.spec.methods[selected - len(self.spec.fields) - 1]

    def generate(self) -> GenerationResult:
        """Generate code for the current spec."""
        return generate_code(self.generator, self.spec)

    def preview(self):
        """Show the generated declaration and any warnings."""
        result = self.generate()
        if not result.success:
            self.console.print(f"[red]❌ Generation error:[/red] {result.error_message}")
            return

        self.console.print(Syntax(result.code, "csharp", theme="monokai"))
        for warning in result.warnings:
            self.console.print(f"  [yellow]•[/yellow] {warning}")

    def save(self) -> Optional[Path]:
        """Generate and write the declaration to a user-chosen path."""
        result = self.generate()
        if not result.success:
            self.console.print(f"[red]❌ Generation error:[/red] {result.error_message}")
            return None

        default_name = f"{result.metadata['class_name'] or 'NewClass'}{self.generator.file_extension}"
        path = Path(Prompt.ask("Save to", default=default_name))

        if path.exists() and not Confirm.ask(f"{path} exists. Overwrite?", default=False):
            return None

        try:
            write_output(path, result.code)
        except OSError as e:
            self.console.print(f"[red]❌ Failed to save {path}:[/red] {e}")
            logger.error("Failed to save %s: %s", path, e)
            return None

        self.console.print(f"[green]✓[/green] Saved to [cyan]{path}[/cyan]")
        return path
