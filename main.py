"""
Main entry point for the option vesting calculator.
"""

from vestcalc import create_app
import os

app = create_app()

if __name__ == "__main__":
    # Get port from environment or use default
    port = int(os.getenv('PORT', 5000))
    debug = os.getenv('FLASK_ENV') == 'development'

    print("\n" + "="*60)
    print("Startup Options Grant Vesting Calculator")
    print("="*60)
    print(f"\nServer starting at: http://127.0.0.1:{port}")
    print("\nPress CTRL+C to quit\n")

    app.run(host='0.0.0.0', port=port, debug=debug)
