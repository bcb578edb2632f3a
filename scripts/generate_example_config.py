import toml

def generate_example_config():
    config = {
        "logging": {
            "level": "INFO",
            "file": ""
        },
        "defaults": {
            "mediaSize": "iso-a4",
            "sides": "one-sided"
        },
        "endpoints": {
            "office": "lpr://<PRINT_HOST>:515/<QUEUE_NAME>?sides=duplex&copies=1",
            "labels": "lpr://<LABEL_HOST>/<QUEUE_NAME>?mimeType=PDF&flavor=DocFlavor.INPUT_STREAM",
            "archive": "lpr://<PRINT_HOST>/<QUEUE_NAME>?sendToPrinter=false"
        }
    }

    with open('config.example.toml', 'w') as f:
        toml.dump(config, f)

if __name__ == "__main__":
    generate_example_config()
