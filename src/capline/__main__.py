from capline.cli.app import app

app()
