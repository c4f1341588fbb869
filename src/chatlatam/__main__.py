from .chatbot import main

main()
