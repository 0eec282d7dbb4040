"""
CLI interface for Behavior Core
"""
import json
import sys

import click
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich import box
from rich.markup import escape

from ..core.config import Config
from ..core.errors import BehaviorError
from ..core.execution import Interpreter, NODE_REGISTRY
from ..core.graph import load_graph
from ..storage import DocumentStore, LocalJSONStore

console = Console()


@click.group()
def cli():
    """Behavior Core - behavior graph interpreter"""
    pass


@cli.command()
@click.argument('graph_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--entry', type=int, default=None, help='Entry node index (default: the document entry)')
@click.option('--world', 'world_file', type=click.Path(dir_okay=False), default=None,
              help='World JSON document reachable by world.* nodes')
@click.option('--max-steps', type=click.IntRange(min=0), default=None,
              help='Abort after this many node evaluations (0 = unbounded)')
@click.option('--save', is_flag=True, help='Write the resulting world back to the world file')
def run(graph_file, entry, world_file, max_steps, save):
    """Run a behavior graph document"""
    if not Config.validate():
        raise click.ClickException("Configuration validation failed. Please check your environment variables.")
    
    world_file = world_file or Config.WORLD_PATH
    if save and not world_file:
        raise click.UsageError("--save requires --world (or BEHAVIOR_CORE_WORLD_PATH)")
    
    try:
        graph = load_graph(graph_file)
        store = LocalJSONStore(world_file) if world_file else DocumentStore()
        interpreter = Interpreter(max_steps=max_steps, **store.binding_callbacks())
        interpreter.run(graph.entry if entry is None else entry, graph.nodes)
    except BehaviorError as e:
        console.print(f"[bold red]✗[/bold red] {type(e).__name__}: {escape(str(e))}")
        sys.exit(1)
    except (OSError, json.JSONDecodeError) as e:
        raise click.ClickException(str(e))
    
    if save:
        store.save()
    
    console.print(Panel(
        Syntax(json.dumps(store.document, indent=2, default=str), "json"),
        title=f"[bold cyan]World after {escape(graph.name or graph_file)}[/bold cyan]",
        box=box.ROUNDED,
        border_style="cyan"
    ))


@cli.command()
@click.option('--category', default=None, help='Only list node types of this category')
def nodes(category):
    """List registered node types"""
    table = Table(box=box.ROUNDED, border_style="cyan")
    table.add_column("Type", style="bold")
    table.add_column("Description", style="dim")
    for node_type in NODE_REGISTRY.node_types(category):
        doc = (NODE_REGISTRY.get(node_type).__doc__ or "").strip()
        table.add_row(node_type, doc.splitlines()[0] if doc else "")
    console.print(table)


@cli.command()
@click.option('--port', default=None, type=int, help='Port to run the API server on')
@click.option('--host', default=None, help='Host to bind to')
def serve(port, host):
    """Run the API server"""
    import uvicorn
    from ..api.server import app
    
    if not Config.validate():
        raise click.ClickException("Configuration validation failed. Please check your environment variables.")
    
    host = host or Config.API_HOST
    port = port or Config.API_PORT
    click.echo(f"Starting Behavior Core API server on {host}:{port}")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    cli()
