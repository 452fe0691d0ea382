from toml_embeds.cli import main

main()
