from src.registry.generate import run_generate

# python -m src.registry
if __name__ == "__main__":
    result = run_generate(use_cache=True, offline=False)
    print(result)
