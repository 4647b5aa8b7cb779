"""
Word Grid Game Server - Main Entry Point

Initializes the game service and starts the Flask-SocketIO application.
"""

from . import create_app
from .config import Config
from .config.game_settings import get_word_statistics
from .services.game_service import initialize_game_service
from .utils.game_logger import game_logger


def main():
    """Initialize services and start the server."""
    try:
        print("Initializing services...")

        initialize_game_service()
        print("✓ Game service initialized successfully")
        game_logger.logger.info(f"Word bank loaded: {get_word_statistics()['total_words']} words")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Word Grid Server starting")

        print(f"\nStarting Word Grid Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG,
                     allow_unsafe_werkzeug=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word Grid Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
