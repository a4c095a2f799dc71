"""CLI for agro-ads - social media ads for animal feed products."""

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from .config import settings
from .errors import InputValidationError
from .models.ad import AdFormat, ImageSource, TextSource
from .services.ad_service import AdService

console = Console()
app = typer.Typer(
    no_args_is_help=True,
    pretty_exceptions_show_locals=False,
)


def get_service() -> AdService:
    return AdService()


@app.command()
def ad(
    product: str = typer.Argument(..., help="Product name, e.g. 'Premium Layer Mash'"),
    ad_format: AdFormat = typer.Option(
        AdFormat.SHORT,
        "--format",
        "-f",
        help="Copy length (default: short)",
    ),
):
    """
    Generate ad copy for a product.

    Examples:
        agro-ads ad "Premium Layer Mash"
        agro-ads ad "Dairy Meal" --format long
    """
    service = get_service()
    try:
        ad_text = asyncio.run(service.generate_ad_text(product, ad_format))
    except InputValidationError as e:
        console.print(f"[red][X] Error:[/red] {e}")
        raise typer.Exit(1)

    source_style = "green" if ad_text.source == TextSource.REMOTE else "yellow"
    console.print(
        Panel(
            ad_text.body,
            title=product,
            subtitle=f"[{source_style}]{ad_text.source.value}[/{source_style}]",
            border_style="cyan",
        )
    )


@app.command()
def image(
    product: str = typer.Argument(..., help="Product name"),
    text: str | None = typer.Option(
        None,
        "--text",
        "-t",
        help="Ad text to draw (generated when omitted)",
    ),
    output: Path = typer.Option(
        Path("ad.png"),
        "--output",
        "-o",
        help="Where to write the PNG",
    ),
):
    """
    Generate an ad image and save it as PNG.

    Examples:
        agro-ads image "Pig Grower Pellets"
        agro-ads image "Broiler Starter" -t "Fast growth!\\nOrder today" -o broiler.png
    """
    service = get_service()
    try:
        if text is None:
            console.print("[blue][Text][/blue] Generating ad copy...")
            text = asyncio.run(service.generate_ad_text(product, AdFormat.SHORT)).body
        else:
            text = text.replace("\\n", "\n")

        console.print("[blue][Image][/blue] Generating image, this can take up to a minute...")
        composed = asyncio.run(service.generate_ad_image(product, text))
    except InputValidationError as e:
        console.print(f"[red][X] Error:[/red] {e}")
        raise typer.Exit(1)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(composed.png_bytes)

    if composed.source == ImageSource.FALLBACK_GRADIENT:
        console.print("[yellow][!] Image provider unavailable, used fallback gradient[/yellow]")
    console.print(f"[green][OK][/green] Saved {output} ({composed.animal_type.value})")


@app.command()
def serve(
    host: str = typer.Option(settings.HOST, "--host", "-h", help="Host"),
    port: int = typer.Option(settings.PORT, "--port", "-p", help="Port"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Hot reload"),
):
    """
    Start the API server.

    Examples:
        agro-ads serve                    # localhost:5000
        agro-ads serve --port 8000
        agro-ads serve --reload
    """
    import uvicorn

    console.print("\n[bold]Animal Feed Ad Generator API[/bold]")
    console.print(f"  URL: http://{host}:{port}")
    console.print(f"  Docs: http://{host}:{port}/docs")
    console.print(f"  Generate ads at: http://{host}:{port}/generate-ad")
    console.print(f"  Generate images at: http://{host}:{port}/generate-image")
    console.print()

    uvicorn.run(
        "agro_ads.api.main:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    app()
