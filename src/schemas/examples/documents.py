from typing import Dict, Any

movie_document_example: Dict[str, Any] = {
    "_id": "573a1390f29313caabcd4135",
    "title": "Blacksmith Scene",
    "year": 1893,
    "runtime": 1,
    "genres": ["Short"],
    "cast": ["Charles Kayser", "John Ott"],
    "plot": "Three men hammer on an anvil and pass a bottle of beer around."
}

theater_document_example: Dict[str, Any] = {
    "_id": "59a47286cfa9a3a73e51e72c",
    "theaterId": 1000,
    "location": {
        "address": {
            "street1": "340 W Market",
            "city": "Bloomington",
            "state": "MN",
            "zipcode": "55425"
        }
    }
}

comment_document_example: Dict[str, Any] = {
    "_id": "5a9427648b0beebeb69579e7",
    "name": "Mercedes Tyler",
    "email": "mercedes_tyler@fakegmail.com",
    "movie_id": "573a1390f29313caabcd4323",
    "text": "Eius veritatis vero facilis quaerat fuga temporibus.",
    "date": "2002-08-18T04:56:07Z"
}

document_response_schema_example: Dict[str, Any] = {
    "status": 200,
    "data": movie_document_example
}

document_list_response_schema_example: Dict[str, Any] = {
    "status": 200,
    "data": [movie_document_example]
}

insert_response_schema_example: Dict[str, Any] = {
    "status": 201,
    "message": "Movie created",
    "data": {
        "acknowledged": True,
        "insertedId": "507f1f77bcf86cd799439011"
    }
}

update_response_schema_example: Dict[str, Any] = {
    "status": 200,
    "message": "Movie updated",
    "data": {
        "acknowledged": True,
        "matchedCount": 1,
        "modifiedCount": 1,
        "upsertedId": None
    }
}

delete_response_schema_example: Dict[str, Any] = {
    "status": 200,
    "message": "Movie deleted",
    "data": {
        "acknowledged": True,
        "deletedCount": 1
    }
}
