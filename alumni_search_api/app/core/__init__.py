"""Configuration, logging and persistence shared by the whole application."""
