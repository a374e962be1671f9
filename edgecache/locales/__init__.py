"""Language, country, locale, translator name and web language code enumerations with their mappings."""