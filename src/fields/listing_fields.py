"""
Canonical listing fields for MLS-style property exports.

Each entry is one canonical field with the raw header spellings seen across
MLS systems, brokerage CRMs and spreadsheet templates.
"""

LISTING_FIELDS_V2 = [
    # Basic property information
    {
        "standard_name": "MLSNumber",
        "variations": ["mls number", "mls#", "mls id", "listing number", "listing id", "property id", "mlsnumber"],
        "required": False,
        "data_type": "string",
        "category": "basic",
    },
    {
        "standard_name": "Status",
        "variations": ["status", "listing status", "property status", "listing state"],
        "required": False,
        "data_type": "string",
        "category": "basic",
    },
    {
        "standard_name": "ListPrice",
        "variations": ["list price", "listing price", "price", "asking price", "current price", "sale price", "listprice"],
        "required": True,
        "data_type": "number",
        "category": "basic",
    },
    {
        "standard_name": "OriginalListPrice",
        "variations": ["original list price", "original price", "initial price", "starting price", "originallistprice"],
        "required": False,
        "data_type": "number",
        "category": "basic",
    },
    {
        "standard_name": "PropertyType",
        "variations": ["property type", "type", "property class", "class", "category", "propertytype", "prop type"],
        "required": True,
        "data_type": "string",
        "category": "basic",
    },
    {
        "standard_name": "PropertySubType",
        "variations": ["property sub type", "subtype", "sub type", "property subtype", "dwelling type", "propertysubtype"],
        "required": False,
        "data_type": "string",
        "category": "basic",
    },
    {
        "standard_name": "ArchitecturalStyle",
        "variations": ["architectural style", "architecture", "style", "home style", "house style", "design style", "arch style"],
        "required": False,
        "data_type": "string",
        "category": "features",
    },
    {
        "standard_name": "YearBuilt",
        "variations": ["year built", "built year", "construction year", "year constructed", "built", "yearbuilt"],
        "required": True,
        "data_type": "number",
        "category": "basic",
    },
    {
        "standard_name": "LivingArea",
        "variations": ["living area", "square feet", "sq ft", "sqft", "total sq ft", "finished sq ft", "interior sq ft", "heated sq ft", "livingarea"],
        "required": True,
        "data_type": "number",
        "category": "basic",
    },

    # Bedrooms and bathrooms
    {
        "standard_name": "BedroomsTotal",
        "variations": ["bedrooms total", "bedrooms", "beds", "bedroom count", "total bedrooms", "bed count", "bedroomstotal"],
        "required": True,
        "data_type": "number",
        "category": "basic",
    },
    {
        "standard_name": "BathroomsFull",
        "variations": ["bathrooms full", "full bathrooms", "full baths", "bathrooms", "baths", "bathroom count", "total bathrooms", "bathroomsfull"],
        "required": True,
        "data_type": "number",
        "category": "basic",
    },
    {
        "standard_name": "BathroomsHalf",
        "variations": ["bathrooms half", "half bathrooms", "half baths", "powder rooms", "guest baths", "bathroomshalf"],
        "required": False,
        "data_type": "number",
        "category": "basic",
    },
    {
        "standard_name": "StoriesTotal",
        "variations": ["stories total", "stories", "levels", "floors", "story count", "floor count", "storiestotal"],
        "required": False,
        "data_type": "number",
        "category": "basic",
    },

    # Location
    {
        "standard_name": "StreetNumber",
        "variations": ["street number", "house number", "address number", "street no", "streetnumber"],
        "required": True,
        "data_type": "string",
        "category": "location",
    },
    {
        "standard_name": "StreetName",
        "variations": ["street name", "street", "road name", "streetname"],
        "required": True,
        "data_type": "string",
        "category": "location",
    },
    {
        "standard_name": "StreetSuffix",
        "variations": ["street suffix", "suffix", "street type", "streetsuffix"],
        "required": False,
        "data_type": "string",
        "category": "location",
    },
    {
        "standard_name": "UnitNumber",
        "variations": ["unit number", "unit", "apt", "apartment", "suite", "unit no"],
        "required": False,
        "data_type": "string",
        "category": "location",
    },
    {
        "standard_name": "City",
        "variations": ["city", "municipality", "town"],
        "required": True,
        "data_type": "string",
        "category": "location",
    },
    {
        "standard_name": "StateOrProvince",
        "variations": ["state", "province", "state or province", "stateorprovince", "state code"],
        "required": True,
        "data_type": "string",
        "category": "location",
    },
    {
        "standard_name": "PostalCode",
        "variations": ["postal code", "zip code", "zip", "postal", "postalcode", "zipcode"],
        "required": True,
        "data_type": "string",
        "category": "location",
    },
    {
        "standard_name": "County",
        "variations": ["county", "parish", "borough"],
        "required": True,
        "data_type": "string",
        "category": "location",
    },
    {
        "standard_name": "ParcelID",
        "variations": ["parcel id", "parcel number", "parcel #", "tax id", "tax parcel", "assessor parcel number", "apn", "parcelid", "parcel"],
        "required": False,
        "data_type": "string",
        "category": "location",
    },
    {
        "standard_name": "SubdivisionName",
        "variations": ["subdivision name", "subdivision", "development", "community", "neighborhood", "subdivisionname"],
        "required": False,
        "data_type": "string",
        "category": "location",
    },
    {
        "standard_name": "Latitude",
        "variations": ["latitude", "lat", "geo lat"],
        "required": False,
        "data_type": "number",
        "category": "location",
    },
    {
        "standard_name": "Longitude",
        "variations": ["longitude", "lng", "long", "geo lng"],
        "required": False,
        "data_type": "number",
        "category": "location",
    },

    # Lot and parking
    {
        "standard_name": "LotSizeSqFt",
        "variations": ["lot size sq ft", "lot size", "lot square feet", "land size", "property size", "lot sqft", "lotsizesqft"],
        "required": True,
        "data_type": "number",
        "category": "basic",
    },
    {
        "standard_name": "LotSizeAcres",
        "variations": ["lot size acres", "acres", "lot acres", "acreage"],
        "required": False,
        "data_type": "number",
        "category": "basic",
    },
    {
        "standard_name": "GarageSpaces",
        "variations": ["garage spaces", "garage", "parking spaces", "car spaces", "garage count", "garagespaces"],
        "required": False,
        "data_type": "number",
        "category": "features",
    },

    # Features
    {
        "standard_name": "Flooring",
        "variations": ["flooring", "floor type", "flooring type", "floor material", "floor covering", "flooring material"],
        "required": False,
        "data_type": "string",
        "category": "features",
    },
    {
        "standard_name": "PoolFeatures",
        "variations": ["pool features", "pool", "swimming pool", "pool type", "pool amenities", "poolfeatures", "spa", "hot tub"],
        "required": False,
        "data_type": "string",
        "category": "features",
    },
    {
        "standard_name": "FireplaceFeatures",
        "variations": ["fireplace features", "fireplace", "fireplaces", "fireplace type", "fireplacefeatures"],
        "required": False,
        "data_type": "string",
        "category": "features",
    },
    {
        "standard_name": "KitchenFeatures",
        "variations": ["kitchen features", "kitchen", "kitchen amenities", "kitchen appliances", "kitchen details", "kitchenfeatures"],
        "required": False,
        "data_type": "string",
        "category": "features",
    },
    {
        "standard_name": "PrimarySuite",
        "variations": ["primary suite", "master suite", "master bedroom", "primary bedroom", "owner suite", "primarysuite"],
        "required": False,
        "data_type": "string",
        "category": "features",
    },
    {
        "standard_name": "LaundryFeatures",
        "variations": ["laundry features", "laundry", "laundry room", "washer dryer", "utility room", "laundryfeatures"],
        "required": False,
        "data_type": "string",
        "category": "features",
    },
    {
        "standard_name": "ConstructionMaterials",
        "variations": ["construction materials", "exterior materials", "building materials", "siding", "constructionmaterials"],
        "required": False,
        "data_type": "string",
        "category": "features",
    },
    {
        "standard_name": "Roof",
        "variations": ["roof", "roof type", "roofing", "roof material", "roofing material"],
        "required": False,
        "data_type": "string",
        "category": "features",
    },
    {
        "standard_name": "FoundationDetails",
        "variations": ["foundation details", "foundation", "foundation type", "basement", "crawl space"],
        "required": False,
        "data_type": "string",
        "category": "features",
    },
    {
        "standard_name": "ExteriorFeatures",
        "variations": ["exterior features", "outdoor features", "yard features", "landscaping", "patio", "deck", "exteriorfeatures"],
        "required": False,
        "data_type": "string",
        "category": "features",
    },
    {
        "standard_name": "View",
        "variations": ["view", "property view", "scenic view", "views", "outlook", "vista"],
        "required": False,
        "data_type": "string",
        "category": "features",
    },
    {
        "standard_name": "WaterSource",
        "variations": ["water source", "water", "water system", "water supply", "watersource"],
        "required": False,
        "data_type": "string",
        "category": "features",
    },
    {
        "standard_name": "Sewer",
        "variations": ["sewer", "sewer system", "septic", "wastewater", "sewage"],
        "required": False,
        "data_type": "string",
        "category": "features",
    },
    {
        "standard_name": "HeatingType",
        "variations": ["heating type", "heating", "heat type", "heating system", "heatingtype", "heat"],
        "required": False,
        "data_type": "string",
        "category": "features",
    },
    {
        "standard_name": "CoolingType",
        "variations": ["cooling type", "cooling", "air conditioning", "ac", "cooling system", "coolingtype"],
        "required": False,
        "data_type": "string",
        "category": "features",
    },
    {
        "standard_name": "PoolPrivate",
        "variations": ["pool private", "private pool", "has pool", "pool yn"],
        "required": False,
        "data_type": "boolean",
        "category": "features",
    },

    # Financial
    {
        "standard_name": "TaxesAnnual",
        "variations": ["taxes annual", "annual taxes", "property taxes", "taxes", "tax amount", "taxesannual"],
        "required": False,
        "data_type": "number",
        "category": "financial",
    },
    {
        "standard_name": "TaxYear",
        "variations": ["tax year", "tax assessment year", "assessment year", "taxyear"],
        "required": False,
        "data_type": "number",
        "category": "financial",
    },
    {
        "standard_name": "AssociationFee",
        "variations": ["association fee", "hoa fee", "hoa", "monthly fee", "maintenance fee", "condo fee", "associationfee"],
        "required": False,
        "data_type": "number",
        "category": "financial",
    },
    {
        "standard_name": "AssociationFeeFrequency",
        "variations": ["association fee frequency", "hoa frequency", "fee frequency", "dues frequency"],
        "required": False,
        "data_type": "string",
        "category": "financial",
    },
    {
        "standard_name": "BuyerAgentCompensation",
        "variations": ["buyer agent compensation", "buyer commission", "co-op commission", "buyer agent fee"],
        "required": False,
        "data_type": "number",
        "category": "financial",
    },
    {
        "standard_name": "SpecialAssessments",
        "variations": ["special assessments", "assessments", "special fees", "one time fees"],
        "required": False,
        "data_type": "number",
        "category": "financial",
    },

    # Agent and office
    {
        "standard_name": "ListingAgentFullName",
        "variations": ["listing agent full name", "listing agent name", "agent name", "listing agent", "realtor name"],
        "required": True,
        "data_type": "string",
        "category": "agent",
    },
    {
        "standard_name": "ListingAgentLicense",
        "variations": ["listing agent license", "agent license", "license number", "agent license number"],
        "required": True,
        "data_type": "string",
        "category": "agent",
    },
    {
        "standard_name": "ListingAgentPhone",
        "variations": ["listing agent phone", "agent phone", "phone", "contact phone", "agent contact"],
        "required": True,
        "data_type": "string",
        "category": "agent",
    },
    {
        "standard_name": "ListingAgentEmail",
        "variations": ["listing agent email", "agent email", "email", "contact email"],
        "required": False,
        "data_type": "string",
        "category": "agent",
    },
    {
        "standard_name": "ListingOfficeName",
        "variations": ["listing office name", "office name", "brokerage", "company", "real estate office"],
        "required": True,
        "data_type": "string",
        "category": "agent",
    },
    {
        "standard_name": "ListingOfficeLicense",
        "variations": ["listing office license", "office license", "brokerage license", "company license"],
        "required": False,
        "data_type": "string",
        "category": "agent",
    },
    {
        "standard_name": "ShowingInstructions",
        "variations": ["showing instructions", "showing notes", "access instructions", "viewing instructions"],
        "required": False,
        "data_type": "string",
        "category": "agent",
    },

    # Media and marketing
    {
        "standard_name": "PhotoURLs",
        "variations": ["photo urls", "photos", "images", "pictures", "photo links", "image urls"],
        "required": False,
        "data_type": "array",
        "category": "media",
    },
    {
        "standard_name": "PublicRemarks",
        "variations": ["public remarks", "description", "property description", "marketing remarks", "comments"],
        "required": False,
        "data_type": "string",
        "category": "media",
    },
    {
        "standard_name": "BrokerRemarks",
        "variations": ["broker remarks", "private remarks", "agent remarks", "internal notes"],
        "required": False,
        "data_type": "string",
        "category": "media",
    },
    {
        "standard_name": "VirtualTourURL",
        "variations": ["virtual tour url", "virtual tour", "tour link", "3d tour", "online tour"],
        "required": False,
        "data_type": "string",
        "category": "media",
    },
    {
        "standard_name": "VideoURL",
        "variations": ["video url", "video", "property video", "video link", "video tour"],
        "required": False,
        "data_type": "string",
        "category": "media",
    },

    # Dates
    {
        "standard_name": "ListDate",
        "variations": ["list date", "listing date", "date listed", "listed date", "on market date"],
        "required": False,
        "data_type": "date",
        "category": "basic",
    },
    {
        "standard_name": "ExpirationDate",
        "variations": ["expiration date", "expires", "listing expires", "expiry date", "listing expiration"],
        "required": False,
        "data_type": "date",
        "category": "basic",
    },
]
