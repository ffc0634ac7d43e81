from unitlane.cli import app

app()
