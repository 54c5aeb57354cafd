from price_tracker.cli import app

app(prog_name="price-tracker")
