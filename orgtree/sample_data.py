"""Small design team used for demos and tests."""

SAMPLE_RECORDS = [
    {"id": "0", "name": "Ann Henry", "title": "Head of design", "imageUrl": "./assets/photos/3.jpg"},
    {"id": "1", "parentId": "0", "name": "Floyd Miles", "title": "Design team lead", "imageUrl": "./assets/photos/32.jpg"},
    {"id": "2", "parentId": "0", "name": "Randall Flores", "title": "Design team lead", "imageUrl": "./assets/photos/37.jpg"},
    {"id": "3", "parentId": "0", "name": "Albert Cooper", "title": "Motion team lead", "imageUrl": "./assets/photos/78.jpg"},
    {"id": "4", "parentId": "1", "name": "Shawn Bell", "title": "Brand designer", "imageUrl": "./assets/photos/49.jpg"},
    {"id": "5", "parentId": "1", "name": "Harold Black", "title": "Brand designer", "imageUrl": "./assets/photos/83.jpg"},
    {"id": "6", "parentId": "1", "name": "Jorge Jones", "title": "Brand designer", "imageUrl": "./assets/photos/64.jpg"},
    {"id": "7", "parentId": "2", "name": "Tyrone Cooper", "title": "Design OPS", "imageUrl": "./assets/photos/68.jpg"},
    {"id": "8", "parentId": "2", "name": "Calvin Howard", "title": "Product designer", "imageUrl": "./assets/photos/74.jpg"},
    {"id": "9", "parentId": "3", "name": "Oryza Sativa", "title": "Motion designer", "imageUrl": "./assets/photos/44.jpg"},
    {"id": "10", "parentId": "8", "name": "Tanya Lane", "title": "Product designer", "imageUrl": "./assets/photos/60.jpg"},
    {"id": "11", "parentId": "8", "name": "Claire Fisher", "title": "Product designer", "imageUrl": "./assets/photos/90.jpg"},
]
