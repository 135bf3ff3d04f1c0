from image_converter.cli.cli import app

app(prog_name="image-converter")
