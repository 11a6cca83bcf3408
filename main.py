import argparse
import uvicorn
from src.api.app import app
from src.config.settings import settings
from src.utils.logging import configure_logging

if __name__ == "__main__":

    parser = argparse.ArgumentParser(description='Rate My Professor Assistant')
    subparsers = parser.add_subparsers(dest='command', help='Commands')
    
    # Server command
    server_parser = subparsers.add_parser('serve', help='Run the API server')
    server_parser.add_argument('--host', default='0.0.0.0', help='Host to run the server on')
    server_parser.add_argument('--port', type=int, default=8000, help='Port to run the server on')
    server_parser.add_argument('--log-level', default=settings.LOG_LEVEL,
                             help='Service log level (DEBUG, INFO, WARNING, ...)')
    
    args = parser.parse_args()
    
    if args.command == 'serve':
        configure_logging(level=args.log_level)
        uvicorn.run(app, host=args.host, port=args.port)
    else:
        parser.print_help()
