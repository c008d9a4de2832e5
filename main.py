# main.py

# Convenience launcher so the app can be started with `python main.py gui`
# from a source checkout. The real entry point lives in connectify/main.py.
from connectify.main import main

if __name__ == '__main__':
    main()
